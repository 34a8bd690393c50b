"""
SPARQL query execution against an rdflib graph.
"""
from typing import Dict, List, Optional
from abc import ABC, abstractmethod
import logging
from rdflib import Graph

from .models import ResultSet

logger = logging.getLogger(__name__)


class QueryError(Exception):
	"""Raised when a query cannot be parsed or evaluated."""


class QueryEngine(ABC):
	"""Anything that answers a SELECT query with a ResultSet."""

	@abstractmethod
	def run(self, query_text: str) -> ResultSet:
		...


class SparqlEngine(QueryEngine):
	"""Run SPARQL SELECT queries on an in-memory rdflib graph."""

	def __init__(self, graph: Graph):
		self.graph = graph

	def run(self, query_text: str) -> ResultSet:
		"""
		Execute a SELECT query.

		Args:
			query_text: SPARQL query text

		Returns:
			ResultSet whose values are the plain text of each binding
			(lexical form for literals, the IRI for resources)

		Raises:
			QueryError: If the query fails or is not a SELECT
		"""
		try:
			result = self.graph.query(query_text)
			if result.type != "SELECT":
				raise QueryError(f"Only SELECT queries are supported, got {result.type}")
			columns = [str(var) for var in result.vars]
			rows: List[Dict[str, Optional[str]]] = []
			for binding in result:
				rows.append({
					name: None if value is None else str(value)
					for name, value in zip(columns, binding)
				})
		except QueryError:
			raise
		except Exception as e:
			logger.debug(f"SPARQL query failed: {e}")
			raise QueryError(str(e)) from e

		logger.debug(f"Query returned {len(rows)} rows")
		return ResultSet(columns=columns, rows=rows)
