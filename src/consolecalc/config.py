"""Fixed settings and console texts of the calculator."""

# Maximum number of operations a calculator can hold
MAX_OPERATIONS = 16

# Longest calculator name read from the console
NAME_MAX_LENGTH = 255

# Token that terminates an expression
END_TOKEN = "="

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

NAME_PROMPT = "Enter calculator's name: "
COUNT_PROMPT = "Enter number of operations: "
OPERATIONS_PROMPT = "Enter operations: "

OPERATION_LEGEND = (
    "+ - add",
    "- - subtract",
    "* - multiply",
    "/ - divide",
    "** - power",
    "V - root",
)

MENU = (
    "1. List supported operations",
    "2. List input format",
    "3. Start calculation",
    "4. Exit",
)

INPUT_FORMAT = (
    "<num1> <symbol> <num2> <symbol> <num3> ... <numN> =",
    "Please make sure to include spaces between each number and operator.",
)

NOT_A_NUMBER_MESSAGE = "Couldn't convert to number!"
INVALID_OPTION_MESSAGE = "Invalid option, try again."
