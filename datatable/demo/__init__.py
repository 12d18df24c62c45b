"""Sample datasets, JSON table loader, and the `datatable` CLI."""
