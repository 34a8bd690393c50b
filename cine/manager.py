"""
Main pipeline: build the graph, persist it, reload it and run the demo queries.
"""
from typing import Iterable, Optional
import logging
import sys
from rdflib import Graph

from .catalog import MOVIES
from .graph import create_graph, save_graph, load_graph
from .models import DemoQuery
from .queries import demo_queries
from .query import QueryEngine, SparqlEngine
from .table import TableRenderer
from .utils import Config

logger = logging.getLogger(__name__)

QUERY_ERROR_PREFIX = "Error en consulta SPARQL: "


class CineManager:
	"""
	Orchestrates the demo:
	1. Build the movie graph in memory
	2. Save it to disk
	3. Load it back
	4. Run each demo query and print the result as a table
	"""

	def __init__(self, config: Config, movies=None):
		self.config = config
		self.movies = MOVIES if movies is None else movies
		self.renderer = TableRenderer(max_width=config.max_col_width)
		self.queries = demo_queries(config.namespace)

	def create_graph(self) -> Graph:
		return create_graph(
			self.movies,
			namespace=self.config.namespace,
			resource_base=self.config.resource_base,
			show_progress=self.config.show_progress
		)

	def save(self, graph: Graph) -> bool:
		"""Save the graph; failures are logged and reported as False."""
		try:
			count = save_graph(graph, self.config.rdf_file, self.config.rdf_format)
		except OSError as e:
			logger.error(f"Error saving RDF file {self.config.rdf_file}: {e}")
			return False

		print(f"✓ Base de datos RDF guardada en: {self.config.rdf_file}")
		print(f"✓ Total de triples creados: {count}\n")
		return True

	def load(self) -> Optional[Graph]:
		"""Load the saved graph, or None if it cannot be read."""
		try:
			graph = load_graph(self.config.rdf_file, self.config.rdf_format)
		except Exception as e:
			logger.error(f"Error loading RDF file {self.config.rdf_file}: {e}")
			return None

		print("✓ Base de datos RDF cargada exitosamente")
		return graph

	def run_query(self, engine: QueryEngine, query: DemoQuery) -> str:
		"""Run one query and return its rendered table or an error line."""
		try:
			result = engine.run(query.sparql)
		except Exception as e:
			logger.error(f"Query '{query.title}' failed: {e}")
			return f"{QUERY_ERROR_PREFIX}{e}"
		return self.renderer.render_result(result)

	def run_demo_queries(self, graph: Graph, only: Optional[Iterable[int]] = None):
		"""
		Print the result of every demo query.

		Args:
			graph: Graph to query
			only: 1-based numbers of the queries to run (all when None)
		"""
		engine = SparqlEngine(graph)
		selected = set(only) if only else None

		print("=== EJECUCIÓN DE CONSULTAS SPARQL ===\n")
		for number, query in enumerate(self.queries, start=1):
			if selected and number not in selected:
				continue
			print(f"--- {query.title} ---")
			text = self.run_query(engine, query)
			stream = sys.stderr if text.startswith(QUERY_ERROR_PREFIX) else sys.stdout
			print(text, file=stream)
			print()

	def run(self, only: Optional[Iterable[int]] = None) -> int:
		"""
		Run the whole pipeline.

		Returns:
			Process exit code (0 on success)
		"""
		print("=== SISTEMA DE GESTIÓN CINE COLOMBIA ===\n")

		graph = self.create_graph()
		if not self.save(graph):
			return 1

		loaded = self.load()
		if loaded is None:
			return 1

		self.run_demo_queries(loaded, only=only)
		return 0
