import pytest

from kogitosteps.builder.mapper import TableMapper, rows_from_table, parse_enabled_disabled
from kogitosteps.constants import RuntimeType
from kogitosteps.datacls import KogitoBuildSpec
from kogitosteps.exceptions import (
    TableFormatError,
    TableMappingError,
    UnrecognizedCategoryError,
    UnrecognizedOptionError,
)


@pytest.fixture
def spec():
    return KogitoBuildSpec(runtime=RuntimeType.QUARKUS)


@pytest.fixture
def mapper():
    return TableMapper()


class FakeRow:
    def __init__(self, cells):
        self.cells = cells


class FakeBehaveTable:
    """Mimics behave's Table: first row parsed as headings."""

    def __init__(self, rows):
        self.headings = rows[0]
        self.rows = [FakeRow(cells) for cells in rows[1:]]


class TestRowsFromTable:

    def test_plain_rows_are_stripped(self):
        assert rows_from_table([[" config ", " key", "value "]]) == [("config", "key", "value")]

    def test_behave_headings_are_data(self):
        table = FakeBehaveTable([["native", "enabled", "true"], ["build-limit", "cpu", "1"]])
        assert rows_from_table(table) == [("native", "enabled", "true"), ("build-limit", "cpu", "1")]

    def test_none_is_empty(self):
        assert rows_from_table(None) == []

    @pytest.mark.parametrize("row", [["config", "key"], ["a", "b", "c", "d"]])
    def test_wrong_cell_count_raises(self, row):
        with pytest.raises(TableFormatError, match="must have 3 cells"):
            rows_from_table([row])


class TestTableMapper:

    def test_native_enabled_and_disabled(self, mapper, spec):
        mapper.map([["native", "enabled", "true"]], spec)
        assert spec.native is True
        mapper.map([["native", "disabled", "whatever"]], spec)
        assert spec.native is False

    def test_native_unknown_subkey_raises(self, mapper, spec):
        with pytest.raises(UnrecognizedOptionError, match="native"):
            mapper.map([["native", "maybe", "true"]], spec)

    def test_config_is_free_form_property(self, mapper, spec):
        mapper.map([["config", "MAVEN_ARGS_APPEND", "-DskipTests"]], spec)
        assert spec.properties == {"MAVEN_ARGS_APPEND": "-DskipTests"}
        assert spec.native is False

    @pytest.mark.parametrize("value, expected", [("enabled", True), ("Disabled", False), ("ENABLED", True)])
    def test_config_native_toggle(self, mapper, spec, value, expected):
        mapper.map([["config", "native", value]], spec)
        assert spec.native is expected
        assert "native" not in spec.properties

    def test_config_native_bad_value_raises(self, mapper, spec):
        with pytest.raises(UnrecognizedOptionError):
            mapper.map([["config", "native", "true"]], spec)

    def test_resources_stored_verbatim(self, mapper, spec):
        mapper.map([
            ["build-request", "cpu", "500m"],
            ["build-request", "memory", "1Gi"],
            ["build-limit", "cpu", "2"],
            ["build-limit", "memory", "not-a-quantity"],
        ], spec)
        assert spec.resources.requests == {"cpu": "500m", "memory": "1Gi"}
        assert spec.resources.limits == {"cpu": "2", "memory": "not-a-quantity"}

    @pytest.mark.parametrize("category", ["build-request", "build-limit"])
    def test_unknown_resource_raises(self, mapper, spec, category):
        with pytest.raises(UnrecognizedOptionError, match="gpu"):
            mapper.map([[category, "gpu", "1"]], spec)

    def test_unknown_category_raises(self, mapper, spec):
        with pytest.raises(UnrecognizedCategoryError, match="runtime-env"):
            mapper.map([["runtime-env", "KEY", "value"]], spec)

    def test_errors_share_mapping_base(self, mapper, spec):
        with pytest.raises(TableMappingError):
            mapper.map([["unknown", "a", "b"]], spec)

    def test_last_write_wins(self, mapper, spec):
        mapper.map([
            ["build-limit", "memory", "1Gi"],
            ["config", "key", "first"],
            ["build-limit", "memory", "2Gi"],
            ["config", "key", "second"],
            ["native", "enabled", ""],
            ["native", "disabled", ""],
        ], spec)
        assert spec.resources.limits == {"memory": "2Gi"}
        assert spec.properties == {"key": "second"}
        assert spec.native is False

    def test_rows_before_failure_stay_applied(self, mapper, spec):
        with pytest.raises(UnrecognizedCategoryError):
            mapper.map([
                ["build-limit", "cpu", "1"],
                ["native", "enabled", "true"],
                ["bogus", "x", "y"],
                ["build-limit", "memory", "1Gi"],
            ], spec)
        assert spec.resources.limits == {"cpu": "1"}
        assert spec.native is True

    def test_empty_table_changes_nothing(self, mapper, spec):
        before = spec.model_copy(deep=True)
        mapper.map([], spec)
        assert spec == before


def test_parse_enabled_disabled_rejects_booleans():
    with pytest.raises(UnrecognizedOptionError, match="Expected 'enabled' or 'disabled'"):
        parse_enabled_disabled("yes")
