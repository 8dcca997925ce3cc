"""Tool Adapters.

Available adapters:
- zeal: Zeal payroll/HR REST API (companies, employees, contractors, checks,
  deductions, accruals, taxes, paperwork, reports)
"""

__all__ = ["zeal"]
