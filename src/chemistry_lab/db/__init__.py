from .schema import (
    DEFAULT_STORE_NAME,
    data_dir_path,
    get_data_dir,
    get_store_path,
    create_schema,
    seed_elements,
    build_store,
)
from .element import Element, ElementDecodeError, Family, map_row
from .element_repo import (
    open_store,
    fetch_by_group,
    fetch_element,
    fetch_random_sample,
    SAMPLE_MAX_ID,
)

__all__ = [
    "DEFAULT_STORE_NAME",
    "data_dir_path",
    "get_data_dir",
    "get_store_path",
    "create_schema",
    "seed_elements",
    "build_store",
    "Element",
    "ElementDecodeError",
    "Family",
    "map_row",
    "open_store",
    "fetch_by_group",
    "fetch_element",
    "fetch_random_sample",
    "SAMPLE_MAX_ID",
]
