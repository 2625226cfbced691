import os

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Statutory payroll constants; unset values fall back to the built-in defaults.
PAYROLL_PF_RATE = os.getenv("PAYROLL_PF_RATE")
PAYROLL_ESI_RATE = os.getenv("PAYROLL_ESI_RATE")
PAYROLL_HRA_RATE = os.getenv("PAYROLL_HRA_RATE")
PAYROLL_MAX_PF_AMOUNT = os.getenv("PAYROLL_MAX_PF_AMOUNT")
PAYROLL_ESI_SALARY_THRESHOLD = os.getenv("PAYROLL_ESI_SALARY_THRESHOLD")
