from enum import Enum

class Distribution(str, Enum):
    RANDOM = "random"
    SORTED = "sorted"
    REVERSED = "reversed"
    FEW_UNIQUE = "few_unique"
    NEARLY_SORTED = "nearly_sorted"

# Swaps applied per 100 elements when building nearly sorted input.
NEARLY_SORTED_SWAP_RATE = 5

# Number of distinct values used for few_unique input.
FEW_UNIQUE_VALUES = 4
