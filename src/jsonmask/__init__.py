"""jsonmask package root."""

from jsonmask.batch import ObfuscationRun, obfuscate_documents
from jsonmask.exceptions import JsonMaskError, NeverThrown
from jsonmask.obfuscate import ObfuscationContext, obfuscate

__all__ = [
    "__version__",
    "JsonMaskError",
    "NeverThrown",
    "ObfuscationContext",
    "ObfuscationRun",
    "obfuscate",
    "obfuscate_documents",
]

__version__ = "0.1.0"
