import logging
from typing import Any, Iterable, List, Sequence, Tuple

from .. import constants
from ..datacls import KogitoBuildSpec
from ..exceptions import (
    TableFormatError,
    UnrecognizedCategoryError,
    UnrecognizedOptionError,
)

logger = logging.getLogger(__name__)

Row = Tuple[str, str, str]


def rows_from_table(table: Any) -> List[Row]:
    """
    Normalizes scenario table input into (category, subkey, value) rows.

    Accepts plain sequences of rows and behave tables. Behave reads the first
    row of a step table as headings, which for these tables is a data row.
    """
    if table is None:
        return []
    if hasattr(table, "headings") and hasattr(table, "rows"):
        raw_rows: List[Sequence[str]] = [list(table.headings)]
        raw_rows.extend(list(row.cells) for row in table.rows)
    else:
        raw_rows = [list(row) for row in table]

    rows: List[Row] = []
    for index, cells in enumerate(raw_rows, start=1):
        if len(cells) != 3:
            raise TableFormatError(
                f"Row {index} must have 3 cells (category, subkey, value), got {len(cells)}: {cells}"
            )
        category, subkey, value = (str(cell).strip() for cell in cells)
        rows.append((category, subkey, value))
    return rows


def parse_enabled_disabled(value: str) -> bool:
    lowered = value.lower()
    if lowered == constants.NATIVE_ENABLED:
        return True
    if lowered == constants.NATIVE_DISABLED:
        return False
    raise UnrecognizedOptionError(
        f"Expected '{constants.NATIVE_ENABLED}' or '{constants.NATIVE_DISABLED}', got '{value}'"
    )


class TableMapper:
    """
    Maps scenario table rows onto a build spec, in place.

    Rows are applied in order and the first unrecognized row raises. Rows
    before it stay applied: a spec that failed mapping must be discarded by
    the caller. Duplicate (category, subkey) pairs keep the last value.
    """

    def __init__(self):
        self._handlers = {
            constants.TABLE_CONFIG: self._map_config,
            constants.TABLE_NATIVE: self._map_native,
            constants.TABLE_BUILD_REQUEST: self._map_build_request,
            constants.TABLE_BUILD_LIMIT: self._map_build_limit,
        }

    @property
    def categories(self) -> Iterable[str]:
        return self._handlers.keys()

    def map(self, table: Any, spec: KogitoBuildSpec) -> KogitoBuildSpec:
        rows = rows_from_table(table)
        logger.debug(f"[Mapper] Mapping {len(rows)} table rows onto build spec...")
        for category, subkey, value in rows:
            handler = self._handlers.get(category)
            if handler is None:
                raise UnrecognizedCategoryError(
                    f"Unrecognized configuration option: {category}, must be one of {sorted(self.categories)}"
                )
            handler(spec, subkey, value)
            logger.debug(f"[Mapper] Applied row '{category} | {subkey} | {value}'.")
        return spec

    def _map_config(self, spec: KogitoBuildSpec, subkey: str, value: str):
        if subkey == constants.CONFIG_NATIVE_KEY:
            spec.native = parse_enabled_disabled(value)
            return
        spec.properties[subkey] = value

    def _map_native(self, spec: KogitoBuildSpec, subkey: str, value: str):
        if subkey == constants.NATIVE_ENABLED:
            spec.native = True
        elif subkey == constants.NATIVE_DISABLED:
            spec.native = False
        else:
            raise UnrecognizedOptionError(f"Unrecognized native configuration option: {subkey}")

    def _map_build_request(self, spec: KogitoBuildSpec, subkey: str, value: str):
        self._check_resource_key(constants.TABLE_BUILD_REQUEST, subkey)
        spec.add_resource_request(subkey, value)

    def _map_build_limit(self, spec: KogitoBuildSpec, subkey: str, value: str):
        self._check_resource_key(constants.TABLE_BUILD_LIMIT, subkey)
        spec.add_resource_limit(subkey, value)

    @staticmethod
    def _check_resource_key(category: str, subkey: str):
        if subkey not in constants.RESOURCE_KEYS:
            raise UnrecognizedOptionError(
                f"Unrecognized {category} resource: {subkey}, must be one of {list(constants.RESOURCE_KEYS)}"
            )
