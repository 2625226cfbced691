"""Example: run the payroll calculator directly (no storage, no services).

Shows the batch rule set and the on-demand estimate side by side for one employee.
"""

from datetime import date

from src.payroll_system.payroll_system.attendance.model import AttendanceRecord
from src.payroll_system.payroll_system.core.enums import AttendanceStatus, VariablePayStatus
from src.payroll_system.payroll_system.payroll.calculator.estimator import OnDemandPayrollEstimator
from src.payroll_system.payroll_system.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.payroll_system.payroll_system.payroll.model import EmployeePayrollInput, VariablePayEntry


def main():
    weekdays = [date(2025, 9, d) for d in range(1, 31) if date(2025, 9, d).weekday() < 5]
    attendance = [AttendanceRecord(work_date=d, status=AttendanceStatus.PRESENT) for d in weekdays]
    attendance[0] = AttendanceRecord(work_date=weekdays[0], status=AttendanceStatus.HALF_DAY)

    data = EmployeePayrollInput(
        employee_id="EMP001",
        month=9,
        year=2025,
        basic_salary=50000,
        attendance=attendance,
        variable_pay_entries=[VariablePayEntry(amount=4000, status=VariablePayStatus.APPROVED)],
    )

    calculator = StandardPayrollCalculator()
    result = calculator.calculate(data)
    print(result.as_dict())
    print(calculator.validate(result))
    print(OnDemandPayrollEstimator().estimate(data).as_dict())


if __name__ == "__main__":
    main()
