"""
Component tree module.

``Component`` is the base every renderable unit derives from; the dashboard
module provides ready-made title, header, table and summary components.
"""

from sheetrender.components.base import Component
from sheetrender.components.dashboard import (
    DataTableComponent,
    DataTableProps,
    DemoDashboardComponent,
    DemoDashboardProps,
    HeaderRowComponent,
    HeaderRowProps,
    SummaryRowComponent,
    SummaryRowProps,
    TitleComponent,
    TitleProps,
)

__all__ = [
    "Component",
    "TitleComponent",
    "TitleProps",
    "HeaderRowComponent",
    "HeaderRowProps",
    "DataTableComponent",
    "DataTableProps",
    "SummaryRowComponent",
    "SummaryRowProps",
    "DemoDashboardComponent",
    "DemoDashboardProps",
]
