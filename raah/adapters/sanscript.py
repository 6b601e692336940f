import logging
try:
    from indic_transliteration import sanscript
except ImportError:
    sanscript = None

from raah.core.catalog import to_local_scheme
from raah.core.errors import LocalConversionError


class SanscriptAdapter:
    """Offline conversion through the indic_transliteration scheme tables."""

    name = "sanscript"

    @property
    def available(self) -> bool:
        return sanscript is not None

    def convert(self, source: str, target: str, text: str) -> str:
        if sanscript is None:
            logging.error("[SANSCRIPT] library missing")
            raise LocalConversionError("indic_transliteration is not installed")
        src = to_local_scheme(source)
        tgt = to_local_scheme(target)
        for scheme in (src, tgt):
            if scheme not in sanscript.SCHEMES:
                raise LocalConversionError(f"no local scheme for {scheme}")
        try:
            return sanscript.transliterate(text, src, tgt)
        except Exception as e:
            raise LocalConversionError(f"{src}->{tgt} conversion failed: {e}") from e
