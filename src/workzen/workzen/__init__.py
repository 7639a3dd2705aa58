"""WorkZen HR/payroll package.

Organized by feature modules (users, attendance, leaves, settings,
permissions, payroll) with a thin Flask controller layer on top of
service/repository layers.
"""
