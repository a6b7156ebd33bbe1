"""Configuration constants for fxgrade."""

# Exchange rate service
API_BASE_URL = "https://api.frankfurter.app/latest"
HTTP_TIMEOUT = None  # one attempt, waits as long as the service takes
USER_AGENT = "fxgrade/1.0"

# Rate lookups
RATE_NOT_FOUND = -1.0

# Display precision
RATE_DECIMALS = 4
AMOUNT_DECIMALS = 2
AVERAGE_DECIMALS = 2

# Console session
CONTINUE_ANSWERS = ("yes", "y")
CURRENCY_PROMPT = "Enter the {role} currency (e.g., USD, EUR, JPY): "
AMOUNT_PROMPT = "Enter the amount in {currency}: "
CONTINUE_PROMPT = "\nDo you want to perform another conversion? (yes/no): "

# Marks
MARK_MIN = 0
MARK_MAX = 100
MARK_SEPARATOR = ","

# Grade thresholds (minimum average percentage for each grade)
GRADE_THRESHOLDS = {
    "A": 90,
    "B": 80,
    "C": 70,
    "D": 60,
}
FAILING_GRADE = "F"

# Grade form
RESULT_PLACEHOLDER = "_"
WINDOW_TITLE = "Student Grade Calculator"
WINDOW_SIZE = (400, 300)
ERROR_DIALOG_TITLE = "Input Error"
