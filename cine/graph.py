"""
Build, save and load the movie graph with rdflib.
"""
from typing import Iterable, Union
from pathlib import Path
import logging
from rdflib import Graph, Literal, Namespace, URIRef
from rdflib.namespace import XSD
from tqdm import tqdm

from .models import Movie

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "http://example.org/cine#"
DEFAULT_RESOURCE_BASE = "http://example.org/pelicula/"
DEFAULT_RDF_FORMAT = "pretty-xml"

# rdflib serializer name -> parser name
PARSE_FORMATS = {
	"pretty-xml": "xml",
	"xml": "xml",
	"turtle": "turtle",
	"nt": "nt",
	"n3": "n3",
	"json-ld": "json-ld",
}


def add_movie(graph: Graph, cine: Namespace, movie: Movie, resource_base: str) -> URIRef:
	"""Add the triples of one movie and return its resource."""
	subject = URIRef(movie.uri(resource_base))

	graph.add((subject, cine.titulo, Literal(movie.title)))
	graph.add((subject, cine.tituloEspanol, Literal(movie.spanish_title)))
	for genre in movie.genres():
		graph.add((subject, cine.genero, Literal(genre)))
	if movie.duration > 0:
		graph.add((subject, cine.duracion, Literal(movie.duration)))
	graph.add((subject, cine.clasificacion, Literal(movie.rating)))
	graph.add((subject, cine.estreno, Literal(movie.release_date.isoformat(), datatype=XSD.date)))
	graph.add((subject, cine.estado, Literal(movie.status)))
	graph.add((subject, cine.preventa, Literal(movie.pre_sale)))
	graph.add((subject, cine.formato, Literal(movie.format)))
	return subject


def create_graph(
	movies: Iterable[Movie],
	namespace: str = DEFAULT_NAMESPACE,
	resource_base: str = DEFAULT_RESOURCE_BASE,
	show_progress: bool = False
) -> Graph:
	"""
	Create an in-memory graph holding the given movies.

	Args:
		movies: Movie listings to add
		namespace: Namespace of the cine: properties
		resource_base: Prefix of the movie resource URIs
		show_progress: Show a progress bar while adding movies

	Returns:
		rdflib Graph with the ``cine`` prefix bound
	"""
	graph = Graph()
	cine = Namespace(namespace)
	graph.bind("cine", cine)

	for movie in tqdm(movies, desc="Adding movies", unit="movie", disable=not show_progress):
		add_movie(graph, cine, movie, resource_base)

	logger.info(f"Created graph with {len(graph)} triples")
	return graph


def save_graph(graph: Graph, path: Union[str, Path], rdf_format: str = DEFAULT_RDF_FORMAT) -> int:
	"""Serialize ``graph`` to ``path`` and return the number of triples written."""
	path = Path(path)
	graph.serialize(destination=str(path), format=rdf_format)
	logger.info(f"Saved {len(graph)} triples to {path} ({rdf_format})")
	return len(graph)


def load_graph(path: Union[str, Path], rdf_format: str = DEFAULT_RDF_FORMAT) -> Graph:
	"""
	Load a graph previously written by ``save_graph``.

	Raises:
		FileNotFoundError: If the file does not exist
		ValueError: If the format is not supported
	"""
	path = Path(path)
	if not path.exists():
		raise FileNotFoundError(f"RDF file not found: {path}")
	if rdf_format not in PARSE_FORMATS:
		raise ValueError(f"Unsupported RDF format: {rdf_format}")

	graph = Graph()
	graph.parse(str(path), format=PARSE_FORMATS[rdf_format])
	logger.info(f"Loaded {len(graph)} triples from {path}")
	return graph
