from .dictionary import DictionaryLoader, StaticLoader, DEFAULT_DICTIONARY_PATH, read_words

__all__ = ["DictionaryLoader", "StaticLoader", "DEFAULT_DICTIONARY_PATH", "read_words"]
