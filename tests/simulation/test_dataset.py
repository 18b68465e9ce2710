"""
Tests for the GeneratedDataset wrapper: records, CSV export and
per-column statistics.
"""

import csv
import io

import pytest

from pysimstats.core.exceptions import ValidationError
from pysimstats.simulation import (
    DemographicConfig,
    GeneratorConfig,
    PsychometricTestConfig,
    generate_dataset,
)


@pytest.fixture
def dataset():
    config = GeneratorConfig(
        sample_size=40,
        tests=(PsychometricTestConfig("Resilience Scale", item_count=3, mean=4, sd=1),),
        demographics=(DemographicConfig("Weight", mean=70.5, sd=8, decimal_places=1),),
    )
    return generate_dataset(config, seed=123)


class TestRecords:

    def test_first_key_is_id(self, dataset):
        assert list(dataset.rows[0]) == ['ID', 'W', 'RS1', 'RS2', 'RS3', 'Total_RS']

    def test_value_types(self, dataset):
        row = dataset.rows[0]
        assert isinstance(row['ID'], int)
        assert isinstance(row['RS1'], int)
        assert isinstance(row['Total_RS'], int)
        assert isinstance(row['W'], float)

    def test_records_are_copies(self, dataset):
        records = dataset.to_records()
        records[0]['RS1'] = -99
        assert dataset.to_records()[0]['RS1'] != -99

    def test_unknown_column(self, dataset):
        with pytest.raises(ValidationError, match="Unknown column"):
            dataset.column('XYZ')


class TestCsv:

    def test_header_and_rows(self, dataset):
        text = dataset.to_csv()
        lines = text.splitlines()
        assert lines[0] == 'ID,W,RS1,RS2,RS3,Total_RS'
        assert len(lines) == 41
        assert lines[1].startswith('1,')

    def test_parses_back(self, dataset):
        rows = list(csv.DictReader(io.StringIO(dataset.to_csv())))
        assert len(rows) == 40
        first = dataset.rows[0]
        assert float(rows[0]['W']) == first['W']
        assert int(rows[0]['Total_RS']) == first['Total_RS']

    def test_decimal_point(self, dataset):
        body = dataset.to_csv().splitlines()[1]
        weight = body.split(',')[1]
        assert '.' in weight


class TestDescribe:

    def test_column_statistics(self, dataset):
        stats = dataset.describe('Total_RS')
        assert stats.name == 'Total_RS'
        assert stats.n == 40
        assert 3 <= stats.min <= stats.max <= 21

    def test_summary_and_repr(self, dataset):
        assert "40 rows" in dataset.summary()
        assert "RS (3 items)" in dataset.summary()
        assert repr(dataset) == "GeneratedDataset(n=40, columns=6)"
        assert dataset.backend_name == 'cpu_dataset'
