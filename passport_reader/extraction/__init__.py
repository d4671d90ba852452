from passport_reader.extraction.base import BaseExtractor
from passport_reader.extraction.extractor import PassportExtractor
from passport_reader.extraction.factory import ExtractorFactory
from passport_reader.extraction.models import PASSPORT_FIELDS, PassportData

__all__ = [
    "PASSPORT_FIELDS",
    "BaseExtractor",
    "ExtractorFactory",
    "PassportData",
    "PassportExtractor",
]
