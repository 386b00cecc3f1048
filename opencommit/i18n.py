"""Localized example messages used by the prompt exemplar.

Each supported language provides a translated fix/feat example commit,
an example description, and the language name used in the instructions.
"""

from dataclasses import dataclass


class UnsupportedLanguageError(Exception):
    """Raised when no translation exists for the requested language."""

    pass


@dataclass(frozen=True)
class Translation:
    """Translated exemplar strings for one language."""

    local_language: str
    commit_fix: str
    commit_feat: str
    commit_description: str


TRANSLATIONS = {
    "en": Translation(
        local_language="english",
        commit_fix=(
            "fix(server.ts): change port variable case from lowercase port "
            "to uppercase PORT to improve semantics"
        ),
        commit_feat=(
            "feat(server.ts): add support for process.env.PORT environment "
            "variable to be able to run app on a configurable port"
        ),
        commit_description=(
            "The port variable is now named PORT, which improves consistency "
            "with the naming conventions as PORT is a constant. Support for an "
            "environment variable allows the application to be more flexible "
            "as it can now run on any available port specified via the "
            "process.env.PORT environment variable."
        ),
    ),
    "pt_br": Translation(
        local_language="portuguese",
        commit_fix=(
            "fix(server.ts): alterar a caixa da variável de minúscula port "
            "para maiúscula PORT para melhorar a semântica"
        ),
        commit_feat=(
            "feat(server.ts): adicionar suporte para a variável de ambiente "
            "process.env.PORT para poder executar o aplicativo em uma porta "
            "configurável"
        ),
        commit_description=(
            "A variável de porta agora é chamada PORT, o que melhora a "
            "consistência com as convenções de nomenclatura, pois PORT é uma "
            "constante. O suporte para uma variável de ambiente permite que o "
            "aplicativo seja mais flexível, pois agora ele pode ser executado "
            "em qualquer porta disponível especificada por meio da variável "
            "de ambiente process.env.PORT."
        ),
    ),
}

LANGUAGE_ALIASES = {
    "en": ["en", "english"],
    "pt_br": [
        "pt_br",
        "pt-br",
        "portuguese",
        "brazilian portuguese",
        "português",
        "português brasileiro",
    ],
}


def get_language_code(language: str) -> str:
    """Resolve a language name or alias to its translation code.

    Args:
        language: A code or alias such as "en", "English" or "pt-br".

    Returns:
        The canonical language code.

    Raises:
        UnsupportedLanguageError: If the language is not known.
    """
    needle = language.strip().lower()
    for code, aliases in LANGUAGE_ALIASES.items():
        if needle in aliases:
            return code
    supported = ", ".join(get_supported_languages())
    raise UnsupportedLanguageError(f"Unsupported language: {language} (supported: {supported})")


def get_translation(language: str) -> Translation:
    """Get translation data for a language.

    Raises:
        UnsupportedLanguageError: If the language is not known.
    """
    return TRANSLATIONS[get_language_code(language)]


def is_language_supported(language: str) -> bool:
    """Check if a language is supported."""
    try:
        get_language_code(language)
    except UnsupportedLanguageError:
        return False
    return True


def get_supported_languages() -> list[str]:
    """Get all supported language codes."""
    return list(TRANSLATIONS)
