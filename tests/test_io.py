"""
Tests for table loading, result writing, configuration and validation.
Author: Rowel Facunla
"""

import csv

import pytest

from window_align.config.config_loader import ConfigLoader, apply_overrides, load_config
from window_align.core.errors import InputFormatError, InvalidQueryError, OutputWriteError
from window_align.core.results import (
    RESULT_HEADER,
    ResultRow,
    ResultTable,
    format_similarity,
    parse_similarity,
)
from window_align.diagnostics.validation import validate_inputs
from window_align.io.results_writer import CsvResultSink, write_results_csv
from window_align.io.table_reader import load_queries, load_sources, validate_queries


def write_csv(path, header, values):
    with open(path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for value in values:
            writer.writerow(value if isinstance(value, (list, tuple)) else [value])
    return str(path)


def make_row(si, qi, scores=(1, 2, 3)):
    return ResultRow(si, qi, f"S{si}", f"Q{qi}", tuple(scores))


# =====================================================================
# LOADING
# =====================================================================

def test_load_sources_by_header_and_uppercase(tmp_path):
    path = write_csv(tmp_path / "a.csv", ["id", "a_sequence"], [["1", "acgt"], ["2", " ggcc "]])
    assert load_sources(path) == ["ACGT", " GGCC "]


def test_load_sources_falls_back_to_first_column(tmp_path):
    path = write_csv(tmp_path / "a.csv", ["sequence", "note"], [["acgt", "x"], ["tt", "y"]])
    assert load_sources(path) == ["ACGT", "TT"]


def test_load_sources_by_position(tmp_path):
    path = write_csv(tmp_path / "a.csv", ["note", "sequence"], [["x", "acgt"]])
    assert load_sources(path, column=1) == ["ACGT"]
    with pytest.raises(InputFormatError):
        load_sources(path, column=5)


def test_load_queries_valid(tmp_path):
    path = write_csv(tmp_path / "b.csv", ["b_sequence"], ["acgtacgtacgtacgtacgt"])
    assert load_queries(path) == ["ACGTACGTACGTACGTACGT"]


@pytest.mark.parametrize("query", ["A" * 19, "A" * 21])
def test_load_queries_rejects_wrong_length(tmp_path, query):
    path = write_csv(tmp_path / "b.csv", ["b_sequence"], ["C" * 20, query])
    with pytest.raises(InvalidQueryError) as excinfo:
        load_queries(path)
    assert excinfo.value.row == 2
    assert excinfo.value.expected == 20


def test_validate_queries_accepts_exact_length():
    validate_queries(["A" * 20, "T" * 20])
    with pytest.raises(InvalidQueryError):
        validate_queries(["A" * 20, ""])


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_sources(str(tmp_path / "nope.csv"))


def test_empty_file_is_malformed(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    with pytest.raises(InputFormatError):
        load_sources(str(path))


def test_empty_source_cell_is_kept(tmp_path):
    path = write_csv(tmp_path / "a.csv", ["a_sequence", "id"], [["ACGT", "1"], ["", "2"]])
    assert load_sources(path) == ["ACGT", ""]


def test_empty_query_cell_is_rejected(tmp_path):
    path = write_csv(tmp_path / "b.csv", ["b_sequence", "id"], [["A" * 20, "1"], ["", "2"]])
    with pytest.raises(InvalidQueryError) as excinfo:
        load_queries(path)
    assert excinfo.value.row == 2


def test_padded_query_is_rejected(tmp_path):
    path = write_csv(tmp_path / "b.csv", ["b_sequence"], [" ACGTACGTACGTACGTACGT "])
    with pytest.raises(InvalidQueryError) as excinfo:
        load_queries(path)
    assert excinfo.value.row == 1


# =====================================================================
# RESULTS
# =====================================================================

def test_similarity_formatting():
    assert format_similarity([12, 0, 7]) == "12,0,7"
    assert format_similarity([]) == ""
    assert parse_similarity("12,0,7") == [12, 0, 7]
    assert parse_similarity("") == []


def test_result_table_drain_and_sort():
    table = ResultTable()
    table.extend([make_row(1, 0), make_row(0, 1), make_row(0, 0)])
    assert len(table) == 3
    table.sort()
    rows = table.drain()
    assert [(r.source_index, r.query_index) for r in rows] == [(0, 0), (0, 1), (1, 0)]
    assert len(table) == 0
    assert table.header == RESULT_HEADER


def test_csv_sink_writes_header_and_rows(tmp_path):
    path = tmp_path / "out" / "result.csv"
    write_results_csv([make_row(0, 0), make_row(0, 1, (40, 8))], str(path))

    with open(path, newline='') as f:
        records = list(csv.reader(f))
    assert records[0] == ["a_sequence", "b_sequence", "similarity_string"]
    assert records[1] == ["S0", "Q0", "1,2,3"]
    assert records[2] == ["S0", "Q1", "40,8"]


def test_csv_sink_unwritable_path(tmp_path):
    blocker = tmp_path / "file.txt"
    blocker.write_text("x")
    sink = CsvResultSink(str(blocker / "result.csv"))
    with pytest.raises(OutputWriteError):
        sink.open()


def test_csv_sink_write_before_open(tmp_path):
    sink = CsvResultSink(str(tmp_path / "result.csv"))
    with pytest.raises(OutputWriteError):
        sink.write_rows([make_row(0, 0)])


# =====================================================================
# CONFIGURATION AND VALIDATION
# =====================================================================

def test_default_config():
    config = load_config()
    assert config['batch']['num_workers'] == 8
    assert config['batch']['drain_every'] == 'auto'
    assert config['io']['output_file'] == 'result.csv'
    assert config['_source'].endswith('default_config.yaml')


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_apply_overrides_merges_sections():
    config = load_config()
    apply_overrides(config, {'batch': {'num_workers': 2, 'queue_size': None}, 'io': {'output_file': 'x.csv'}})
    assert config['batch']['num_workers'] == 2
    assert config['batch']['drain_every'] == 'auto'
    assert config['io']['output_file'] == 'x.csv'
    assert config['io']['source_file'] == 'a_sequence.csv'


def test_config_loader_falls_back_to_defaults(tmp_path):
    loader = ConfigLoader(str(tmp_path / "missing.yaml"))
    assert loader.get_batch_params()['num_workers'] == 8
    assert loader.get_io_params()['query_column'] == 'b_sequence'


def test_validate_inputs(tmp_path):
    source = write_csv(tmp_path / "a.csv", ["a_sequence"], ["ACGT"])
    query = write_csv(tmp_path / "b.csv", ["b_sequence"], ["A" * 20])
    ok, errors = validate_inputs(source, query, str(tmp_path / "out" / "result.csv"))
    assert ok
    assert errors == []
    assert (tmp_path / "out").is_dir()

    with pytest.raises(FileNotFoundError):
        validate_inputs(str(tmp_path / "missing.csv"), query, str(tmp_path / "r.csv"))

    empty = tmp_path / "empty.csv"
    empty.write_text("")
    ok, errors = validate_inputs(str(empty), query, str(tmp_path / "r.csv"))
    assert not ok
    assert "empty" in errors[0]
