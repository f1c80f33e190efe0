"""
Sanitizador de queries para o índice full-text (SQLite FTS5).

Texto do usuário nunca pode ser interpretado como sintaxe do FTS5
(injeção via aspas, parênteses, filtros de coluna "col:", "^", "NEAR(", etc.).
Ao mesmo tempo a intenção explícita é preservada:

- Frases entre aspas balanceadas: "dados pessoais"
- Operadores booleanos em MAIÚSCULAS entre dois termos: AND, OR, NOT
- Prefixo: trat*

Regras por token:
- Palavra só com letras/dígitos -> termo puro
- Palavra com '*' final e corpo alfanumérico -> prefixo
- Palavra com pontuação ("13.709/2018", "1=1") -> frase entre aspas
  (o tokenizer do FTS5 quebra em termos adjacentes)
- Palavra sem nenhuma letra/dígito ("--", "()") -> descartada
- Operador no início, no fim ou repetido -> descartado
- Aspas desbalanceadas -> todas as aspas viram texto comum

Uso:
    variants = build_query_variants('"dados pessoais" OR consentimento')
    # variants[0]: a query sanitizada; variants[1]: a entrada inteira como uma única frase
"""

import re
from dataclasses import dataclass
from typing import List

BOOLEAN_OPERATORS = frozenset({"AND", "OR", "NOT"})

# Palavras reservadas do FTS5 que não podem sair como termo puro
_RESERVED_TERMS = frozenset({"NEAR"})

_QUOTED_OR_WORD_RE = re.compile(r'"(?P<phrase>[^"]*)"|(?P<word>[^\s"]+)')
_PLAIN_TERM_RE = re.compile(r"^\w+$", re.UNICODE)
_PREFIX_TERM_RE = re.compile(r"^(?P<body>\w+)\*$", re.UNICODE)
_HAS_WORD_CHAR_RE = re.compile(r"[^\W_]", re.UNICODE)

# Caracteres de controle C0 (inclui NUL) e DEL; o SQLite corta a string no NUL
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")


def strip_control_chars(text: str) -> str:
    """Troca caracteres de controle por espaço."""
    return _CONTROL_CHARS_RE.sub(" ", text or "")


@dataclass(frozen=True)
class _Token:
    kind: str   # "term" ou "operator"
    text: str


def quote_phrase(text: str) -> str:
    """Envolve o texto como frase FTS5 (aspas internas duplicadas)."""
    return '"' + text.replace('"', '""') + '"'


def _term_token(word: str) -> List[_Token]:
    if not _HAS_WORD_CHAR_RE.search(word):
        return []

    if word.upper() in _RESERVED_TERMS:
        return [_Token("term", quote_phrase(word))]

    if _PLAIN_TERM_RE.match(word):
        return [_Token("term", word)]

    prefix = _PREFIX_TERM_RE.match(word)
    if prefix:
        return [_Token("term", f"{prefix.group('body')}*")]

    return [_Token("term", quote_phrase(word))]


def _tokenize(raw: str) -> List[_Token]:
    text = raw
    if text.count('"') % 2:
        # Aspas desbalanceadas não abrem frase
        text = text.replace('"', " ")

    tokens: List[_Token] = []
    for match in _QUOTED_OR_WORD_RE.finditer(text):
        phrase = match.group("phrase")
        if phrase is not None:
            if _HAS_WORD_CHAR_RE.search(phrase):
                tokens.append(_Token("term", quote_phrase(" ".join(phrase.split()))))
            continue

        word = match.group("word")
        if word in BOOLEAN_OPERATORS:
            tokens.append(_Token("operator", word))
        else:
            tokens.extend(_term_token(word))

    return tokens


def sanitize_fts_query(raw_query: str) -> str:
    """
    Converte a query do usuário em uma expressão FTS5 sintaticamente segura.

    Args:
        raw_query: Texto livre do usuário

    Returns:
        Expressão FTS5 (pode ser "" se não sobrar nenhum termo)

    Exemplos:
        >>> sanitize_fts_query('" OR 1=1 --')
        '"1=1"'
        >>> sanitize_fts_query('dados AND pessoais')
        'dados AND pessoais'
        >>> sanitize_fts_query('Lei 13.709/2018')
        'Lei "13.709/2018"'
    """
    raw_query = strip_control_chars(raw_query)
    if not raw_query.strip():
        return ""

    output: List[str] = []
    pending_operator = None

    for token in _tokenize(raw_query):
        if token.kind == "operator":
            # Operador só vale entre dois termos; o último repetido vence
            if output:
                pending_operator = token.text
            continue

        if pending_operator:
            output.append(pending_operator)
            pending_operator = None
        output.append(token.text)

    return " ".join(output)


def build_query_variants(raw_query: str) -> List[str]:
    """
    Gera as variantes seguras de uma query, na ordem em que devem ser tentadas.

    1. Query sanitizada (preserva frases, operadores e prefixos)
    2. Fallback: a entrada inteira como uma única frase

    O chamador usa a primeira variante que executar sem erro de sintaxe.

    Args:
        raw_query: Texto livre do usuário

    Returns:
        Lista sem duplicatas (vazia se a entrada for vazia)
    """
    raw_query = strip_control_chars(raw_query)
    if not raw_query.strip():
        return []

    variants = []

    sanitized = sanitize_fts_query(raw_query)
    if sanitized:
        variants.append(sanitized)

    variants.append(quote_phrase(" ".join(raw_query.split())))

    return list(dict.fromkeys(variants))
