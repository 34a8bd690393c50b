"""
Demo SPARQL queries over the movie graph.
"""
from typing import List

from .models import DemoQuery

XSD_PREFIX = "PREFIX xsd: <http://www.w3.org/2001/XMLSchema#>\n"

QUERY_BODIES = [
	(
		"1. PELÍCULAS EN CARTELERA",
		False,
		"""SELECT ?tituloEspanol ?estreno ?duracion WHERE {
    ?pelicula cine:tituloEspanol ?tituloEspanol .
    ?pelicula cine:estreno ?estreno .
    ?pelicula cine:duracion ?duracion .
    ?pelicula cine:estado "En cartelera" .
} ORDER BY ?estreno""",
	),
	(
		"2. PREVENTAS",
		False,
		"""SELECT ?tituloEspanol ?estreno ?formato WHERE {
    ?pelicula cine:tituloEspanol ?tituloEspanol .
    ?pelicula cine:preventa true .
    ?pelicula cine:estreno ?estreno .
    ?pelicula cine:formato ?formato .
} ORDER BY ?estreno""",
	),
	(
		"3. >2 HORAS",
		False,
		"""SELECT ?tituloEspanol ?duracion ?genero WHERE {
    ?pelicula cine:tituloEspanol ?tituloEspanol .
    ?pelicula cine:duracion ?duracion .
    ?pelicula cine:genero ?genero .
    FILTER (?duracion > 120)
} ORDER BY DESC(?duracion)""",
	),
	(
		"4. POR CLASIFICACIÓN",
		False,
		"""SELECT ?tituloEspanol ?clasificacion ?genero WHERE {
    ?pelicula cine:tituloEspanol ?tituloEspanol .
    ?pelicula cine:clasificacion ?clasificacion .
    ?pelicula cine:genero ?genero .
} ORDER BY ?clasificacion""",
	),
	(
		"5. CONCIERTOS Y EVENTOS",
		False,
		"""SELECT ?tituloEspanol ?duracion ?estreno WHERE {
    ?pelicula cine:tituloEspanol ?tituloEspanol .
    ?pelicula cine:genero ?genero .
    ?pelicula cine:duracion ?duracion .
    ?pelicula cine:estreno ?estreno .
    FILTER (?genero = "Concierto" || ?genero = "Documental")
}""",
	),
	(
		"6. ESTRENOS NOV 2025",
		True,
		"""SELECT ?tituloEspanol ?estreno ?genero WHERE {
    ?pelicula cine:tituloEspanol ?tituloEspanol .
    ?pelicula cine:estreno ?estreno .
    ?pelicula cine:genero ?genero .
    FILTER (?estreno >= "2025-11-01"^^xsd:date && ?estreno <= "2025-11-30"^^xsd:date)
} ORDER BY ?estreno""",
	),
	(
		"7. FAMILIA/ANIMACIÓN",
		False,
		"""SELECT ?tituloEspanol ?clasificacion ?duracion WHERE {
    ?pelicula cine:tituloEspanol ?tituloEspanol .
    ?pelicula cine:genero ?genero .
    ?pelicula cine:clasificacion ?clasificacion .
    ?pelicula cine:duracion ?duracion .
    FILTER (?genero = "Familiar" || ?genero = "Animación")
}""",
	),
	(
		"8. DURACIÓN PROMEDIO POR GÉNERO",
		False,
		"""SELECT ?genero (AVG(?duracion) AS ?duracionPromedio) (COUNT(?pelicula) AS ?totalPeliculas) WHERE {
    ?pelicula cine:genero ?genero .
    ?pelicula cine:duracion ?duracion .
    FILTER (?duracion > 0)
} GROUP BY ?genero ORDER BY DESC(?duracionPromedio)""",
	),
	(
		"9. TERROR / SUSPENSO",
		False,
		"""SELECT ?tituloEspanol ?clasificacion ?duracion WHERE {
    ?pelicula cine:tituloEspanol ?tituloEspanol .
    ?pelicula cine:genero ?genero .
    ?pelicula cine:clasificacion ?clasificacion .
    ?pelicula cine:duracion ?duracion .
    FILTER (?genero = "Terror" || ?genero = "Suspenso" || ?genero = "Thriller")
}""",
	),
	(
		"10. PRÓXIMOS ESTRENOS",
		True,
		"""SELECT ?tituloEspanol ?estreno ?formato WHERE {
    ?pelicula cine:tituloEspanol ?tituloEspanol .
    ?pelicula cine:estreno ?estreno .
    ?pelicula cine:formato ?formato .
    FILTER (?estreno > "2025-11-13"^^xsd:date)
} ORDER BY ?estreno""",
	),
]


def build_query(namespace: str, body: str, needs_xsd: bool = False) -> str:
	"""Prepend the PREFIX declarations to a query body."""
	prefixes = f"PREFIX cine: <{namespace}>\n"
	if needs_xsd:
		prefixes += XSD_PREFIX
	return prefixes + body


def demo_queries(namespace: str) -> List[DemoQuery]:
	"""Get the demo query catalogue for a graph using ``namespace``."""
	return [
		DemoQuery(title=title, sparql=build_query(namespace, body, needs_xsd))
		for title, needs_xsd, body in QUERY_BODIES
	]
