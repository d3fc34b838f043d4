"""
Creational Patterns Package
Factory Method and Abstract Factory demonstrations
"""

__version__ = "1.0.0"

from .notifications import (
    Channel, Notification, BaseCreator, NotificationCreator,
    email_creator, sms_creator, push_creator, get_creator, send_notification
)
from .reports import (
    Department, ReportFormat, Report, PDFReport, ExcelReport, HTMLReport,
    BaseReportFactory, DepartmentReportFactory,
    sales_factory, hr_factory, get_factory, generate_reports
)

__all__ = [
    # Factory Method
    'Channel',
    'Notification',
    'BaseCreator',
    'NotificationCreator',
    'email_creator',
    'sms_creator',
    'push_creator',
    'get_creator',
    'send_notification',

    # Abstract Factory
    'Department',
    'ReportFormat',
    'Report',
    'PDFReport',
    'ExcelReport',
    'HTMLReport',
    'BaseReportFactory',
    'DepartmentReportFactory',
    'sales_factory',
    'hr_factory',
    'get_factory',
    'generate_reports'
]
