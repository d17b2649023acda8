from .extractor import OfflineIndexExtractor
from .reader import ArchiveReader, ZipArchiveReader

__all__ = ["ArchiveReader", "OfflineIndexExtractor", "ZipArchiveReader"]
