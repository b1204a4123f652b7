"""Tests for JSON lines and stats exporters."""
import io
import json

import pytest

from bounds_core.errors import BoundsIOError, SerializationError
from bounds_core.export.base import open_sink
from bounds_core.export.jsonl_exporter import JSONLinesExporter, emit, serialize
from bounds_core.export.stats_exporter import StatsReportExporter, format_summary
from bounds_core.extraction.boundary_stats import summarize, tally_boundaries
from bounds_core.filters.predicates import RelationPredicates
from bounds_core.models.elements import OSMRelation, object_from_record
from bounds_core.parsing.closure import load_closure


@pytest.fixture
def candidate_closure(memory_source):
    return load_closure(memory_source, RelationPredicates().is_candidate)


class FailingSink(io.StringIO):
    """Text sink that fails after a number of writes."""

    def __init__(self, fail_after):
        super().__init__()
        self.fail_after = fail_after
        self.writes = 0

    def write(self, text):
        if self.writes >= self.fail_after:
            raise OSError(28, 'No space left on device')
        self.writes += 1
        return super().write(text)


class TestJSONLinesExporter:
    """Tests for JSONLinesExporter."""

    def test_writes_targets_only(self, candidate_closure):
        """One line per target relation, in ID order."""
        sink = io.StringIO()
        written = JSONLinesExporter().export(candidate_closure, sink)

        lines = sink.getvalue().splitlines()
        assert written == 3
        assert [json.loads(line)['id'] for line in lines] == [1000, 1001, 1002]

    def test_line_format(self, candidate_closure):
        """Lines are compact, self-describing relation records."""
        sink = io.StringIO()
        emit(candidate_closure, sink)
        record = json.loads(sink.getvalue().splitlines()[1])

        assert record == {
            'type': 'relation',
            'id': 1001,
            'tags': {'name': 'Test County', 'admin_level': '6',
                     'boundary': 'administrative'},
            'members': [{'type': 'way', 'id': 101, 'role': 'outer'}],
        }

    def test_round_trip(self, candidate_closure):
        """Parsed lines rebuild the relations in the result set."""
        sink = io.StringIO()
        emit(candidate_closure, sink)

        for line in sink.getvalue().splitlines():
            relation = object_from_record(json.loads(line))
            assert candidate_closure[relation.object_id] == relation

    def test_non_ascii_kept(self):
        """Names are written as UTF-8, not escaped."""
        relation = OSMRelation(1, tags={'name': 'Île-de-France'})
        assert 'Île-de-France' in serialize(relation)

    def test_empty_result(self, make_source):
        """No targets means no output and no error."""
        result = load_closure(make_source([]), RelationPredicates().is_candidate)
        sink = io.StringIO()
        assert emit(result, sink) == 0
        assert sink.getvalue() == ''

    def test_write_failure(self, candidate_closure):
        """Sink failures surface as BoundsIOError after earlier lines."""
        sink = FailingSink(fail_after=2)
        with pytest.raises(BoundsIOError):
            emit(candidate_closure, sink)
        assert len(sink.getvalue().splitlines()) == 1

    def test_serialization_failure(self):
        """Unencodable objects raise SerializationError."""
        relation = OSMRelation(1, tags={'name': object()})
        with pytest.raises(SerializationError):
            serialize(relation)


class TestStatsExport:
    """Tests for aggregation and the text report."""

    def test_summary_includes_absent_bucket(self, candidate_closure):
        """Relations without a boundary tag are counted as None."""
        assert summarize(candidate_closure) == [
            ('administrative', 2), ('country_border', 1), (None, 1)
        ]

    def test_counts_sum_to_candidates(self, candidate_closure):
        """Counts add up to the number of candidate relations."""
        predicates = RelationPredicates()
        candidates = [obj for obj in candidate_closure.values() if predicates.is_candidate(obj)]
        tally = tally_boundaries(candidate_closure, predicates)

        assert tally.total == len(candidates)
        counts = [count for _, count in tally.ranked()]
        assert counts == sorted(counts, reverse=True)
        assert all(count >= 0 for count in counts)

    def test_format_summary(self):
        """Lines are value, space, count."""
        assert format_summary([('administrative', 2), (None, 1)], absent_label='(none)') == [
            'administrative 2', '(none) 1'
        ]

    def test_literal_none_value_distinct(self, make_source, make_relation):
        """A boundary=none tag and a missing tag get separate lines."""
        source = make_source([
            make_relation(1, [], name='A', admin_level='4', boundary='none'),
            make_relation(2, [], name='B', admin_level='4'),
        ])
        sink = io.StringIO()
        StatsReportExporter().export(load_closure(source, RelationPredicates().is_candidate), sink)

        assert sink.getvalue() == 'none 1\n(none) 1\n'

    def test_report(self, candidate_closure):
        """The report writes one line per value."""
        sink = io.StringIO()
        lines = StatsReportExporter().export(candidate_closure, sink)

        assert lines == 3
        assert sink.getvalue() == 'administrative 2\ncountry_border 1\n(none) 1\n'

    def test_report_absent_label(self, candidate_closure):
        """The absent label is configurable."""
        sink = io.StringIO()
        StatsReportExporter(absent_label='(no boundary)').export(candidate_closure, sink)
        assert sink.getvalue().splitlines()[-1] == '(no boundary) 1'


class TestOpenSink:
    """Tests for open_sink."""

    def test_file_sink(self, tmp_path):
        """Files are created and closed."""
        path = tmp_path / 'out.jsonl'
        with open_sink(str(path)) as sink:
            sink.write('line\n')
        assert sink.closed
        assert path.read_text(encoding='utf-8') == 'line\n'

    def test_stdout_sink(self, capsys):
        """Without a path output goes to stdout."""
        with open_sink(None) as sink:
            sink.write('hello\n')
        assert capsys.readouterr().out == 'hello\n'

    def test_unwritable_path(self, tmp_path):
        """Output into a missing directory is an I/O error."""
        with pytest.raises(BoundsIOError):
            with open_sink(str(tmp_path / 'missing' / 'out.jsonl')):
                pass
