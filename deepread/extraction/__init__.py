from deepread.extraction.base import BaseExtractor
from deepread.extraction.extractor import Extractor
from deepread.extraction.factory import ExtractorFactory

__all__ = ["BaseExtractor", "Extractor", "ExtractorFactory"]
