"""Demo applications: a console model demo and an MVC-style HTTP server."""

__version__ = "0.1.0"