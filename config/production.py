import os

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

PAYROLL_PF_RATE = os.getenv("PAYROLL_PF_RATE")
PAYROLL_ESI_RATE = os.getenv("PAYROLL_ESI_RATE")
PAYROLL_HRA_RATE = os.getenv("PAYROLL_HRA_RATE")
PAYROLL_MAX_PF_AMOUNT = os.getenv("PAYROLL_MAX_PF_AMOUNT")
PAYROLL_ESI_SALARY_THRESHOLD = os.getenv("PAYROLL_ESI_SALARY_THRESHOLD")
