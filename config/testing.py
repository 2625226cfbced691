DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"

# Tests run against the statutory defaults regardless of the environment.
PAYROLL_PF_RATE = None
PAYROLL_ESI_RATE = None
PAYROLL_HRA_RATE = None
PAYROLL_MAX_PF_AMOUNT = None
PAYROLL_ESI_SALARY_THRESHOLD = None
