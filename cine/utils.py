"""
Configuration and utilities for the Cine Colombia demo.
"""
import os
import logging
from typing import Optional
from dotenv import load_dotenv

from .graph import DEFAULT_NAMESPACE, DEFAULT_RESOURCE_BASE, DEFAULT_RDF_FORMAT, PARSE_FORMATS
from .table import DEFAULT_MAX_WIDTH, ELLIPSIS

DEFAULT_RDF_FILE = "cine_colombia_actual.rdf"


class Config:
	"""Configuration manager for file locations and rendering settings."""

	def __init__(self, env_file: Optional[str] = None):
		"""
		Load configuration from environment variables.

		Args:
			env_file: Path to .env file (optional)
		"""
		if env_file:
			load_dotenv(env_file)
		else:
			load_dotenv()

		# Storage
		self.rdf_file = os.getenv('CINE_RDF_FILE', DEFAULT_RDF_FILE)
		self.rdf_format = os.getenv('CINE_RDF_FORMAT', DEFAULT_RDF_FORMAT)

		# Vocabulary
		self.namespace = os.getenv('CINE_NAMESPACE', DEFAULT_NAMESPACE)
		self.resource_base = os.getenv('CINE_RESOURCE_BASE', DEFAULT_RESOURCE_BASE)

		# Rendering
		self.max_col_width = int(os.getenv('MAX_COL_WIDTH', str(DEFAULT_MAX_WIDTH)))
		self.show_progress = os.getenv('SHOW_PROGRESS', 'false').lower() == 'true'

		# Logging
		self.log_level = os.getenv('LOG_LEVEL', 'INFO')

	def validate(self) -> bool:
		"""
		Validate the settings.

		Returns:
			True if configuration is valid

		Raises:
			ValueError: If a setting is out of range
		"""
		if self.max_col_width <= len(ELLIPSIS):
			raise ValueError(f"MAX_COL_WIDTH must be greater than {len(ELLIPSIS)}")

		if self.rdf_format not in PARSE_FORMATS:
			raise ValueError(f"Unsupported CINE_RDF_FORMAT: {self.rdf_format}")

		if not self.rdf_file:
			raise ValueError("CINE_RDF_FILE must not be empty")

		return True


def setup_logging(level: str = 'INFO'):
	"""
	Configure logging for the application.

	Args:
		level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
	"""
	logging.basicConfig(
		level=getattr(logging, level.upper()),
		format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
		datefmt='%Y-%m-%d %H:%M:%S'
	)
