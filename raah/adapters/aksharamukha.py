import logging
try:
    from aksharamukha.transliterate import process
except ImportError:
    process = None

from raah.core.catalog import to_remote_script_name
from raah.core.errors import LocalConversionError


class AksharaAdapter:
    """Offline conversion with the aksharamukha package.

    The package shares its script names with the hosted service, so it covers
    Assamese where the sanscript tables do not.
    """

    name = "aksharamukha"

    @property
    def available(self) -> bool:
        return process is not None

    def convert(self, source: str, target: str, text: str) -> str:
        if process is None:
            logging.error("[AKSHARA] library missing")
            raise LocalConversionError("aksharamukha is not installed")
        src = to_remote_script_name(source)
        tgt = to_remote_script_name(target)
        # aksharamukha is sync and cheap for short inputs; called directly
        try:
            return process(src, tgt, text)
        except Exception as e:
            raise LocalConversionError(f"{src}->{tgt} conversion failed: {e}") from e
