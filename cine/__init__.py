"""
Cine Colombia - RDF movie graph with SPARQL queries rendered as ASCII tables.
"""

__version__ = "0.1.0"

from .models import (
	Movie,
	ResultSet,
	DemoQuery
)
from .catalog import MOVIES
from .graph import create_graph, save_graph, load_graph
from .query import QueryEngine, SparqlEngine, QueryError
from .queries import demo_queries
from .table import TableRenderer, DisplayTable, render_table
from .manager import CineManager
from .utils import Config, setup_logging

__all__ = [
	"Movie",
	"ResultSet",
	"DemoQuery",
	"MOVIES",
	"create_graph",
	"save_graph",
	"load_graph",
	"QueryEngine",
	"SparqlEngine",
	"QueryError",
	"demo_queries",
	"TableRenderer",
	"DisplayTable",
	"render_table",
	"CineManager",
	"Config",
	"setup_logging",
]
