"""Constants used across fizzprop modules."""

# driver range, stop is exclusive
RANGE_START = 1
RANGE_STOP = 100

FIZZ_DIVISOR = 3
FIZZ_STEP = 3
BUZZ_DIVISOR = 5
BUZZ_STEP = 5

FIZZ_TAG = "fizz"
BUZZ_TAG = "buzz"
FAILURE_KINDS = frozenset({FIZZ_TAG, BUZZ_TAG})

OK_LINE_FORMAT = "{index} => {value}"
ERR_LINE_FORMAT = "{index} => Error: {kind}"
