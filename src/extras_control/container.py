from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_EXPECTED_ARRIVAL, DEFAULT_VALOR_DIARIA
from .payroll.service import PayrollReportService
from .portaria.service import PortariaService
from .reports.exporters import ExcelExporter
from .reports.pdf import PdfExporter
from .reports.service import AuditReportService
from .requests.memory_request_repository import InMemoryRequestRepository
from .requests.repository import RequestRepository
from .requests.service import RequestService
from .saldo.service import SaldoService


@dataclass(frozen=True)
class Container:
    requests_repo: RequestRepository

    request_service: RequestService
    portaria_service: PortariaService
    payroll_report_service: PayrollReportService
    audit_report_service: AuditReportService
    excel_exporter: ExcelExporter
    pdf_exporter: PdfExporter
    saldo_service: SaldoService


def build_container(
    *,
    expected_arrival: str = DEFAULT_EXPECTED_ARRIVAL,
    valor_diaria: float = DEFAULT_VALOR_DIARIA,
    requests_repo: Optional[RequestRepository] = None,
) -> Container:
    requests_repo = requests_repo or InMemoryRequestRepository()

    request_service = RequestService(requests_repo)
    portaria_service = PortariaService(requests_repo)
    payroll_report_service = PayrollReportService()
    audit_report_service = AuditReportService(expected_arrival=expected_arrival)
    excel_exporter = ExcelExporter(payroll_report_service)
    pdf_exporter = PdfExporter(payroll_report_service)
    saldo_service = SaldoService(valor_diaria=valor_diaria)

    return Container(
        requests_repo=requests_repo,
        request_service=request_service,
        portaria_service=portaria_service,
        payroll_report_service=payroll_report_service,
        audit_report_service=audit_report_service,
        excel_exporter=excel_exporter,
        pdf_exporter=pdf_exporter,
        saldo_service=saldo_service,
    )
