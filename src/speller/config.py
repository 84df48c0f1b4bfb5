MAX_EDIT_DISTANCE: int = 2
CONTEXT_BOOST: int = 1000

# Also scan the whole vocabulary for distance-2 candidates the deletion index cannot see
FULL_SCAN: bool = True

# Request-time tokenization: "whitespace" (split on blanks) or "tokens" (full tokenizer)
REQUEST_TOKENIZATION: str = "whitespace"

# /* ~~~ corpus discovery: only files ending with this suffix ("" or None = every file) ~~~ */
CORPUS_SUFFIX: str | None = ".txt"
DEFAULT_CORPUS_DIR: str = "data"

# /* ~~~ where a trained model lives between runs ~~~ */
DEFAULT_MODEL_DSN: str = "file:///modele_taln.spm"

# Plain-text import layout (text:///dir)
DICT_FILENAME: str = "dictionnaire.txt"
BIGRAM_FILENAME: str = "bigrammes.txt"
