"""datatable — sortable, filterable, column-hideable tables."""

__version__ = "0.1.0"
