from datetime import date, datetime

import pytest

from src.payroll_system.payroll_system.attendance.model import AttendanceRecord
from src.payroll_system.payroll_system.core.constants import PayrollRates
from src.payroll_system.payroll_system.core.enums import AttendanceStatus, VariablePayStatus
from src.payroll_system.payroll_system.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.payroll_system.payroll_system.payroll.model import (
    EmployeePayrollInput,
    PayrollCalculationOptions,
    VariablePayEntry,
)

# September 2025 has 22 weekdays.
SEPTEMBER_WEEKDAYS = [date(2025, 9, d) for d in range(1, 31) if date(2025, 9, d).weekday() < 5]


def fixed_today():
    return date(2026, 10, 19)


def present_all_month():
    return [AttendanceRecord(work_date=d, status=AttendanceStatus.PRESENT) for d in SEPTEMBER_WEEKDAYS]


def make_input(basic_salary=50000, **kwargs) -> EmployeePayrollInput:
    kwargs.setdefault("attendance", present_all_month())
    return EmployeePayrollInput(employee_id="emp-1", month=9, year=2025, basic_salary=basic_salary, **kwargs)


def assert_identities(result):
    assert result.total_earnings == (
        result.basic_salary + result.hra + result.variable_pay + result.overtime + result.allowances
    )
    assert result.total_deductions == (
        result.pf + result.esi + result.tax + result.insurance + result.leave_deduction + result.other_deductions
    )
    assert result.net_salary == result.total_earnings - result.total_deductions


def test_full_month_end_to_end():
    calc = StandardPayrollCalculator(today=fixed_today)

    result = calc.calculate(make_input(50000))

    assert result.working_days == 22
    assert result.present_days == 22
    assert result.leave_days == 0
    assert result.basic_salary == 50000
    assert result.hra == 20000
    assert result.pf == 1800
    assert result.esi == 0
    assert result.tax == 6708
    assert result.total_earnings == 70000
    assert result.net_salary == 70000 - (1800 + 0 + 6708 + 0 + 0 + 0)
    assert_identities(result)
    assert calc.validate(result).is_valid


def test_calculation_is_deterministic():
    calc = StandardPayrollCalculator(today=fixed_today)
    data = make_input(
        38750,
        variable_pay_entries=[VariablePayEntry(amount=1234.5, status=VariablePayStatus.APPROVED)],
    )

    assert calc.calculate(data) == calc.calculate(data)


@pytest.mark.parametrize("basic_salary", [0, 9999, 18000, 21000, 21001, 45678, 250000])
@pytest.mark.parametrize("absent_days", [0, 1, 3])
def test_arithmetic_identities_hold(basic_salary, absent_days):
    records = present_all_month()
    for i in range(absent_days):
        records[i] = AttendanceRecord(work_date=SEPTEMBER_WEEKDAYS[i], status=AttendanceStatus.ABSENT)
    calc = StandardPayrollCalculator(today=fixed_today)

    result = calc.calculate(make_input(basic_salary, attendance=records))

    assert_identities(result)
    assert result.pf <= 1800
    assert result.present_days + result.leave_days == result.working_days


def test_overtime_and_esi_for_lower_salary():
    long_day = AttendanceRecord(
        work_date=SEPTEMBER_WEEKDAYS[0],
        status=AttendanceStatus.PRESENT,
        check_in=datetime(2025, 9, 1, 9, 0),
        check_out=datetime(2025, 9, 1, 19, 0),
    )
    calc = StandardPayrollCalculator(today=fixed_today)

    result = calc.calculate(make_input(17600, attendance=[long_day] + present_all_month()[1:]))

    assert result.basic_salary == 17600
    assert result.overtime == 300
    assert result.hra == 7040
    assert result.esi == 132
    assert result.pf == 1800
    assert result.total_earnings == 17600 + 7040 + 300


def test_half_day_reduces_basic_and_adds_leave_deduction():
    records = present_all_month()
    records[0] = AttendanceRecord(work_date=SEPTEMBER_WEEKDAYS[0], status=AttendanceStatus.HALF_DAY)
    calc = StandardPayrollCalculator(today=fixed_today)

    result = calc.calculate(make_input(22000, attendance=records))

    assert result.present_days == 21.5
    assert result.leave_days == 0.5
    assert result.basic_salary == 21500
    # Leave is deducted from the already pro-rated basic as well.
    assert result.leave_deduction == 489


def test_only_approved_variable_pay_is_included():
    entries = [
        VariablePayEntry(amount=5000, status=VariablePayStatus.APPROVED),
        VariablePayEntry(amount=7000, status=VariablePayStatus.PENDING),
        VariablePayEntry(amount=9000, status=VariablePayStatus.REJECTED),
    ]
    calc = StandardPayrollCalculator(today=fixed_today)

    result = calc.calculate(make_input(50000, variable_pay_entries=entries))

    assert result.variable_pay == 5000
    assert result.total_earnings == 75000


def test_variable_pay_can_be_excluded():
    entries = [VariablePayEntry(amount=5000, status=VariablePayStatus.APPROVED)]
    calc = StandardPayrollCalculator(today=fixed_today)

    result = calc.calculate(
        make_input(50000, variable_pay_entries=entries),
        PayrollCalculationOptions(include_variable_pay=False),
    )

    assert result.variable_pay == 0


def test_without_attendance_every_working_day_counts_as_present():
    calc = StandardPayrollCalculator(today=fixed_today)

    result = calc.calculate(make_input(50000, attendance=[]), PayrollCalculationOptions(include_attendance=False))

    assert result.present_days == result.working_days == 22
    assert result.basic_salary == 50000


def test_empty_attendance_yields_zero_basic():
    calc = StandardPayrollCalculator(today=fixed_today)

    result = calc.calculate(make_input(50000, attendance=[]))

    assert result.present_days == 0
    assert result.basic_salary == 0
    assert result.net_salary == 0


def test_missing_attendance_is_treated_as_full_month():
    calc = StandardPayrollCalculator(today=fixed_today)

    result = calc.calculate(make_input(50000, attendance=None))

    assert result.present_days == 22
    assert result.basic_salary == 50000


def test_statutory_deductions_can_be_switched_off():
    records = present_all_month()
    records[0] = AttendanceRecord(work_date=SEPTEMBER_WEEKDAYS[0], status=AttendanceStatus.ABSENT)
    calc = StandardPayrollCalculator(today=fixed_today)

    result = calc.calculate(
        make_input(22000, attendance=records),
        PayrollCalculationOptions(include_statutory_deductions=False),
    )

    assert (result.pf, result.esi, result.tax, result.insurance) == (0, 0, 0, 0)
    # Leave deduction is not statutory and still applies, on the pro-rated 21000.
    assert result.leave_deduction == 955
    assert result.total_deductions == 955


def test_without_pro_rating_nominal_salary_is_used():
    records = present_all_month()
    records[0] = AttendanceRecord(work_date=SEPTEMBER_WEEKDAYS[0], status=AttendanceStatus.ABSENT)
    calc = StandardPayrollCalculator(today=fixed_today)

    result = calc.calculate(
        make_input(22000, attendance=records),
        PayrollCalculationOptions(pro_rate_for_mid_month_exit=False),
    )

    assert result.basic_salary == 22000
    assert result.leave_deduction == 1000


def test_hire_date_in_current_month_prorates_from_hire_day():
    calc = StandardPayrollCalculator(today=lambda: date(2025, 9, 20))

    result = calc.calculate(make_input(22000, hire_date=date(2025, 9, 10)))

    assert result.basic_salary == 13000


def test_exit_date_in_current_month_prorates_until_exit():
    calc = StandardPayrollCalculator(today=lambda: date(2025, 9, 20))

    result = calc.calculate(make_input(22000, exit_date=date(2025, 9, 12)))

    assert result.basic_salary == 12000


def test_rates_are_injectable():
    calc = StandardPayrollCalculator(PayrollRates(max_pf_amount=3000, hra_rate=0.5), today=fixed_today)

    result = calc.calculate(make_input(50000))

    assert result.pf == 3000
    assert result.hra == 25000
    assert calc.validate(result).warnings == ()


def test_insurance_hook_can_be_overridden():
    class InsuredCalculator(StandardPayrollCalculator):
        def calculate_insurance(self, basic_salary):
            return 500

    result = InsuredCalculator(today=fixed_today).calculate(make_input(50000))

    assert result.insurance == 500
    assert result.net_salary == 70000 - (1800 + 6708 + 500)
