"""
CSV Handler Module
Reads WooCommerce exports and writes Shopify import files with encoding
detection and error handling.
"""

import csv
import pandas as pd
import chardet
from pathlib import Path
from typing import Optional, Dict, List, Any, Sequence
from loguru import logger


CANDIDATE_DELIMITERS = ',\t|;'


class CSVHandler:
    """Handle CSV file operations with encoding detection and error handling."""

    def __init__(self, encoding: Optional[str] = None):
        """
        Initialize CSV handler.

        Args:
            encoding: Optional encoding to use. If None, will auto-detect.
        """
        self.encoding = encoding
        self.detected_encoding = None
        self.parse_warnings: List[str] = []

    def detect_encoding(self, file_path: str) -> str:
        """
        Detect the encoding of a CSV file.

        Args:
            file_path: Path to the CSV file

        Returns:
            Detected encoding string
        """
        try:
            with open(file_path, 'rb') as f:
                raw_data = f.read(10000)  # Read first 10KB for detection
                result = chardet.detect(raw_data)
                encoding = result['encoding']
                confidence = result['confidence']

                logger.info(f"Detected encoding: {encoding} (confidence: {confidence:.2%})")
                return encoding or 'utf-8'
        except OSError as e:
            logger.warning(f"Could not detect encoding, using UTF-8: {e}")
            return 'utf-8'

    def detect_delimiter(self, file_path: str, encoding: str) -> str:
        """
        Guess the field delimiter among comma, tab, pipe and semicolon.

        Args:
            file_path: Path to the CSV file
            encoding: Encoding used to decode the sample

        Returns:
            Delimiter character, ',' when nothing better is found
        """
        try:
            with open(file_path, 'r', encoding=encoding, errors='replace', newline='') as f:
                sample = f.read(10000)
            delimiter = csv.Sniffer().sniff(sample, delimiters=CANDIDATE_DELIMITERS).delimiter
        except csv.Error:
            delimiter = ','
        logger.debug(f"Using delimiter: {delimiter!r}")
        return delimiter

    def _on_bad_line(self, bad_line: List[str]) -> None:
        message = f"Skipping malformed line with {len(bad_line)} fields: {bad_line[:3]}..."
        self.parse_warnings.append(message)
        logger.warning(message)
        return None

    def _read_frame(self, file_path: Path, encoding: str) -> pd.DataFrame:
        return pd.read_csv(
            file_path,
            encoding=encoding,
            sep=self.detect_delimiter(str(file_path), encoding),
            engine='python',
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            on_bad_lines=self._on_bad_line,
        )

    def read_records(self, file_path: str, encoding: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Read a CSV file into a list of row dictionaries.

        Cells are returned as strings exactly as they appear in the file;
        blanks are empty strings. Malformed lines are logged and skipped.

        Args:
            file_path: Path to the CSV file
            encoding: Optional encoding (will detect if not provided)

        Returns:
            One dictionary per data row, keyed by header
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"CSV file not found: {file_path}")

        if encoding is None:
            encoding = self.encoding or self.detect_encoding(str(file_path))
        self.detected_encoding = encoding
        self.parse_warnings = []

        logger.info(f"Reading CSV file: {file_path}")

        try:
            df = self._read_frame(file_path, encoding)
        except UnicodeDecodeError:
            logger.warning("Encoding error, trying UTF-8-BOM")
            self.parse_warnings = []
            self.detected_encoding = 'utf-8-sig'
            df = self._read_frame(file_path, 'utf-8-sig')
        except pd.errors.EmptyDataError:
            logger.warning(f"CSV file is empty: {file_path}")
            return []

        df.columns = [str(column).strip() for column in df.columns]
        logger.info(f"Successfully read {len(df)} rows from {file_path}")
        return df.to_dict('records')

    def write_rows(
        self,
        rows: Sequence[Dict[str, Any]],
        file_path: str,
        fieldnames: Sequence[str],
        encoding: str = 'utf-8',
    ) -> None:
        """
        Write row dictionaries to a CSV file under a fixed header.

        Args:
            rows: Rows to write; keys outside fieldnames are ignored
            file_path: Output file path
            fieldnames: Column order of the output file
            encoding: Encoding to use (default: utf-8 to match Shopify template)
        """
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        logger.info(f"Writing CSV file: {file_path} ({len(rows)} rows)")

        # Fill blanks before building the frame so int columns never pass through NaN/float
        records = [
            {name: '' if row.get(name) is None else row.get(name) for name in fieldnames}
            for row in rows
        ]
        df = pd.DataFrame(records, columns=list(fieldnames))
        for col in df.columns:
            df[col] = df[col].astype(str)

        try:
            df.to_csv(
                file_path,
                encoding=encoding,
                index=False,
                lineterminator='\n',  # Use Unix line endings
            )
        except OSError as e:
            logger.error(f"Error writing CSV file: {e}")
            raise
        logger.info(f"Successfully wrote CSV file: {file_path}")
