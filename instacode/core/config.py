#!/usr/bin/env python3
import os


class TranslatorConfig:
    def __init__(self):
        self.indent = "    "
        self.default_data_file_name = "datos.txt"
        self.strict = False
        self.verbose = False

    @classmethod
    def from_env(cls) -> 'TranslatorConfig':
        config = cls()
        data_file = os.environ.get('INSTACODE_DATA_FILE')
        if data_file and data_file.strip():
            config.default_data_file_name = data_file.strip()
        strict = os.environ.get('INSTACODE_STRICT')
        if strict is not None:
            config.strict = strict.strip().lower() in ('1', 'true', 'yes', 'on')
        return config
