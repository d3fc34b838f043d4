#!/usr/bin/env python3
"""
Abstract Factory Pattern Implementation
Department report factories producing consistent PDF, Excel and HTML reports
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Dict, List, Tuple, Union
import logging

logger = logging.getLogger(__name__)

OutputSink = Callable[[str], None]

class Department(str, Enum):
    """Departments a report factory can serve"""
    SALES = "sales"
    HR = "hr"

    @property
    def label(self) -> str:
        return DEPARTMENT_LABELS[self]

class ReportFormat(str, Enum):
    """Report families"""
    PDF = "pdf"
    EXCEL = "excel"
    HTML = "html"

    @property
    def label(self) -> str:
        return FORMAT_LABELS[self]

DEPARTMENT_LABELS: Dict[Department, str] = {
    Department.SALES: "Sales",
    Department.HR: "HR",
}

FORMAT_LABELS: Dict[ReportFormat, str] = {
    ReportFormat.PDF: "PDF",
    ReportFormat.EXCEL: "Excel",
    ReportFormat.HTML: "HTML",
}

@dataclass(frozen=True)
class Report(ABC):
    """Report product tagged with the department it belongs to"""
    department: Department

    @property
    @abstractmethod
    def format(self) -> ReportFormat:
        """Report family, fixed per product class"""

    def generate(self, out: OutputSink = print) -> str:
        """Write the generated line for this report and return it"""
        line = f"{self.department.label} {self.format.label} report generated"
        out(line)
        return line

@dataclass(frozen=True)
class PDFReport(Report):
    format: ClassVar[ReportFormat] = ReportFormat.PDF

@dataclass(frozen=True)
class ExcelReport(Report):
    format: ClassVar[ReportFormat] = ReportFormat.EXCEL

@dataclass(frozen=True)
class HTMLReport(Report):
    format: ClassVar[ReportFormat] = ReportFormat.HTML

class BaseReportFactory(ABC):
    """
    Abstract factory for a related set of reports

    Every product is built from the department returned by get_department,
    so one factory always yields reports of a single department.
    """

    @abstractmethod
    def get_department(self) -> Department:
        pass

    def produce_pdf(self) -> PDFReport:
        return PDFReport(self.get_department())

    def produce_excel(self) -> ExcelReport:
        return ExcelReport(self.get_department())

    def produce_html(self) -> HTMLReport:
        return HTMLReport(self.get_department())

    def produce_all(self) -> Tuple[PDFReport, ExcelReport, HTMLReport]:
        """Create one report of every family"""
        return self.produce_pdf(), self.produce_excel(), self.produce_html()

@dataclass(frozen=True)
class DepartmentReportFactory(BaseReportFactory):
    """Report factory bound to one department, fixed at construction"""
    department: Department

    def get_department(self) -> Department:
        return self.department

    @classmethod
    def for_department(cls, department: Union[Department, str]) -> 'DepartmentReportFactory':
        return cls(Department(department))

sales_factory = DepartmentReportFactory(Department.SALES)
hr_factory = DepartmentReportFactory(Department.HR)

FACTORIES: Dict[Department, DepartmentReportFactory] = {
    Department.SALES: sales_factory,
    Department.HR: hr_factory,
}

def get_factory(key: Union[Department, str]) -> DepartmentReportFactory:
    """
    Look up the report factory for a department

    Raises:
        ValueError: If the department is unknown
    """
    try:
        department = Department(key.lower() if isinstance(key, str) else key)
    except ValueError:
        raise ValueError(
            f"Department '{key}' not available. "
            f"Available: {', '.join(d.value for d in FACTORIES)}"
        ) from None

    return FACTORIES[department]

def generate_reports(factory: BaseReportFactory, out: OutputSink = print) -> List[str]:
    """
    Client code: create every report family from one factory and generate each

    Args:
        factory: Any report factory
        out: Sink receiving each output line

    Returns:
        Generated lines in PDF, Excel, HTML order
    """
    lines = []

    pdf_report = factory.produce_pdf()
    lines.append(pdf_report.generate(out))

    excel_report = factory.produce_excel()
    lines.append(excel_report.generate(out))

    html_report = factory.produce_html()
    lines.append(html_report.generate(out))

    logger.debug(f"Generated {len(lines)} reports")
    return lines
