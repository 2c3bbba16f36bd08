# -*- coding: utf-8 -*-
"""
IO Base Classes - Abstract interface for image writers.

Defines the abstract base class for writing rendered grids to image
files. Concrete implementations (PNG) provide the format-specific
encoding.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np


class ImageWriter(ABC):
    """
    Abstract base class for all image writers.

    Attributes
    ----------
    filepath : Path
        Path where the image will be written
    metadata : Dict[str, Any]
        Writer bookkeeping; not every format embeds it
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Initialize the image writer.

        Parameters
        ----------
        filepath : Union[str, Path]
            Path where the image will be written
        metadata : Optional[Dict[str, Any]], default=None
            Metadata associated with the output file
        """
        self.filepath = Path(filepath)
        self.metadata = metadata or {}

    @abstractmethod
    def write(self, data: np.ndarray) -> None:
        """
        Write image data to file.

        Parameters
        ----------
        data : np.ndarray
            Image data to write

        Raises
        ------
        ValueError
            If data format is incompatible with the output format
        IOError
            If writing fails
        """
        pass

    def close(self) -> None:
        """
        Close the writer and release resources.

        Default implementation does nothing. Override if the writer
        maintains open file handles or other resources.
        """
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False
