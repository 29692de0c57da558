from enum import Enum


class SortCriterion(str, Enum):
    """Keys of the inventory sort dropdown options."""

    NAME_ASC = "az"
    NAME_DESC = "za"
    PRICE_ASC = "lowhigh"
    PRICE_DESC = "highlow"
