"""
Movie listings used to populate the demo graph.
"""
from datetime import date
from typing import List

from .models import Movie

MAYORES_7 = "Mayores de 7 años"
MAYORES_12 = "Mayores de 12 años"

MOVIES: List[Movie] = [
	Movie(
		id="1", title="Now You See Me: Now You Don't", spanish_title="Los Ilusionistas 3",
		genre="Thriller", duration=112, rating=MAYORES_12,
		release_date=date(2025, 11, 13), pre_sale=True, format="Estreno",
	),
	Movie(
		id="2", title="Wicked: for Good", spanish_title="Wicked: Por Siempre",
		genre="Musical", duration=138, rating=MAYORES_12,
		release_date=date(2025, 11, 20), pre_sale=True, format="Preventa",
	),
	Movie(
		id="3", title="Seventeen World Tour [NEW_] In Japan: Live Viewing",
		spanish_title="Seventeen World Tour [NEW_] In Japan: Live Viewing",
		genre="Concierto", duration=225, rating="Por confirmar",
		release_date=date(2025, 11, 29), pre_sale=True, format="Estreno",
	),
	# No published runtime yet
	Movie(
		id="4", title="Predator: Badlands", spanish_title="Depredador: Tierras Salvajes",
		genre="Acción", duration=0, rating=MAYORES_12,
		release_date=date(2025, 11, 6), pre_sale=False, format="Estreno",
	),
	Movie(
		id="5", title="Twice One in a Million", spanish_title="Twice One in a Million",
		genre="Documental", duration=121, rating=MAYORES_7,
		release_date=date(2025, 11, 6), pre_sale=True, format="Estreno",
	),
	Movie(
		id="6", title="Grand Prix of Europe", spanish_title="El Gran Premio: A Toda Velocidad",
		genre="Animación", duration=98, rating="Para todo el Público",
		release_date=date(2025, 11, 6), pre_sale=False, format="Estreno",
	),
	Movie(
		id="7", title="Roofman", spanish_title="Un Buen Ladrón",
		genre="Comedia", duration=126, rating=MAYORES_12,
		release_date=date(2025, 11, 6), pre_sale=False, format="Estreno",
	),
	Movie(
		id="8", title="Dollhouse", spanish_title="Dollhouse: Muñeca Maldita",
		genre="Terror", duration=109, rating="Exclusiva para Mayores de 15 años",
		release_date=date(2025, 11, 6), pre_sale=True, format="Preventa",
	),
	Movie(
		id="9", title="Rebbeca: Becky G", spanish_title="Rebbeca: Becky G",
		genre="Musical", duration=98, rating=MAYORES_12,
		release_date=date(2025, 12, 10), pre_sale=True, format="Preventa",
	),
	Movie(
		id="10", title="Tron: Ares", spanish_title="Tron: Ares",
		genre="Acción", duration=119, rating=MAYORES_7,
		release_date=date(2025, 10, 9), pre_sale=False, format="Estreno",
	),
]
