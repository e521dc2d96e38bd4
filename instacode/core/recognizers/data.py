#!/usr/bin/env python3
"""
Ingestion of the auxiliary data file.

The payload supplied with the script is embedded in the generated program
twice: startup statements write it back to disk under its file name, and
the values are appended to the collections the script created, one column
per collection.
"""

import re
from typing import List

from ..instruction import Instruction
from ..normalizer import ensure_number_string, is_decimal_number, is_number, quoted, split_lines
from ..symbols import Collection

_FILE_NAME_RES = [
    re.compile(r'archivo llamado ([^\s,]+)', re.IGNORECASE),
    re.compile(r'desde (?:el )?archivo ([^\s,]+)', re.IGNORECASE),
]
_LEADING_VERBS = ('leer', 'cargar', 'importar')


def is_data_instruction(text: str) -> bool:
    for verb in _LEADING_VERBS:
        if text.startswith(f"{verb} los datos") or text.startswith(f"{verb} desde"):
            return True
    return any(verb in text for verb in _LEADING_VERBS) and 'archivo' in text


def file_name_from(raw: str, default: str) -> str:
    """File name given by the line itself, keeping its original case."""
    for pattern in _FILE_NAME_RES:
        match = pattern.search(raw)
        if match:
            name = match.group(1).strip().rstrip('.')
            if name:
                return name
    return default


def _value_literal(collection: Collection, value: str) -> str:
    if collection.is_numeric and is_number(value):
        floating = collection.element_type == 'double' or is_decimal_number(value)
        return ensure_number_string(value, floating)
    return quoted(value)


class _Loader:
    """Emits the element statements for one target collection."""

    def __init__(self, session, collection: Collection):
        self.session = session
        self.collection = collection
        self.count = 0
        if not collection.is_array and collection.length > 0:
            session.emit(f"{collection.name}.clear();")

    def add(self, value: str):
        literal = _value_literal(self.collection, value)
        if self.collection.is_array:
            if self.count < self.collection.length:
                self.session.emit(f"{self.collection.name}[{self.count}] = {literal};")
        else:
            self.session.emit(f"{self.collection.name}.push_back({literal});")
        self.count += 1

    def finish(self):
        """The loaded count becomes the collection's length; arrays never grow."""
        if self.collection.is_array:
            if self.count > self.collection.length:
                self.session.warning(
                    f"El arreglo '{self.collection.name}' solo admite {self.collection.length} "
                    f"elementos; se ignoraron {self.count - self.collection.length}."
                )
            self.collection.length = min(self.count, self.collection.length)
            return
        self.collection.length = self.count


def _load_single_column(session, lines: List[str]) -> bool:
    collection = session.symbols.last_collection()
    if collection is None:
        session.missing(
            "Error: No se encontró ninguna lista para cargar los datos. "
            "Cree una lista antes de leer los datos."
        )
        return True

    session.emit("// Cargar datos desde archivo (una columna)")
    loader = _Loader(session, collection)
    for line in lines:
        value = line.strip()
        if value:
            loader.add(value)
    loader.finish()
    return True


def _load_columns(session, lines: List[str], columns: int) -> bool:
    collections = session.symbols.recent_collections(columns)
    if len(collections) < columns:
        session.missing(
            f"Error: Se necesitan {columns} listas para los datos de {columns} columnas, "
            f"pero solo se encontraron {len(collections)}. Cree más listas antes de leer los datos."
        )
        return True

    session.emit(f"// Cargar datos desde archivo ({columns} columnas)")
    loaders = [_Loader(session, collection) for collection in collections]
    for line in lines:
        parts = line.strip().split(',')
        if len(parts) < columns:
            continue
        for loader, part in zip(loaders, parts):
            value = part.strip()
            if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
                value = value[1:-1]
            loader.add(value)
    for loader in loaders:
        loader.finish()
    return True


def read_data_file(session, ins: Instruction) -> bool:
    """leer los datos del archivo llamado paises.txt"""
    if not is_data_instruction(ins.text):
        return False

    contents = session.require_data()
    lines = [line.strip() for line in split_lines(contents) if line.strip()]
    if not lines:
        session.missing("Error: El archivo de datos está vacío.", fails=True)
        return True

    file_name = file_name_from(ins.raw, session.data_file_name)
    session.materialize_data_file(file_name, lines)
    session.include("vector")

    columns = lines[0].count(',') + 1
    if columns == 1:
        return _load_single_column(session, lines)
    return _load_columns(session, lines, columns)
