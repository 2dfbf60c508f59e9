"""Controle de Extras package.

Organized by feature modules (requests, portaria, payroll, reports, saldo)
with a thin Flask controller layer over plain service/repository layers.
"""
