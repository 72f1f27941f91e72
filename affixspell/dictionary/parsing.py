"""Reading .aff/.dic sources into dictionary snapshots.

Only the tables the spellchecker consumes are extracted: flag directives,
TRY, REP and COMPOUNDRULE from the affix file, and spellings with their
flags from the word list. Affix classes (PFX/SFX) are not expanded.
"""

import re
from dataclasses import dataclass, field

from loguru import logger

from affixspell.core.errors import DictionaryParseError
from affixspell.dictionary.snapshot import DictionarySnapshot
from affixspell.utils.constants import Constants

FLAG_TYPES = ("char", "long", "num")

# Directives whose single argument is a flag code
FLAG_DIRECTIVES = frozenset(
    {
        "KEEPCASE",
        "ONLYINCOMPOUND",
        "NOSUGGEST",
    }
)

# Directives whose single argument is a number
NUMERIC_DIRECTIVES = frozenset({"COMPOUNDMIN"})

# Directives introducing a counted table of entries
TABLE_DIRECTIVES = frozenset({"REP", "COMPOUNDRULE"})


@dataclass
class AffixData:
    """Tables read from an affix file."""

    flag_type: str = "char"
    flags: dict[str, int | str] = field(default_factory=dict)
    replacement_table: list[tuple[str, str]] = field(default_factory=list)
    compound_rules: list[str] = field(default_factory=list)
    try_characters: str = ""


def parse_flags(flag_string: str, flag_type: str = "char", line_number: int | None = None) -> list[str]:
    """Split a flag field into individual rule codes.

    Args:
        flag_string: The text after '/' in a word-list line
        flag_type: "char" (one character each), "long" (two characters) or "num"
        line_number: Source line for error messages

    Returns:
        Rule codes in source order
    """
    if not flag_string:
        return []

    if flag_type == "long":
        if len(flag_string) % 2:
            raise DictionaryParseError(f"odd-length long flag field {flag_string!r}", line_number)
        return [flag_string[i : i + 2] for i in range(0, len(flag_string), 2)]

    if flag_type == "num":
        codes = [code.strip() for code in flag_string.split(",")]
        if not all(code.isdigit() for code in codes):
            raise DictionaryParseError(f"invalid numeric flag field {flag_string!r}", line_number)
        return codes

    return list(flag_string)


def _split_compound_rule(rule: str, flag_type: str) -> list[str]:
    """Tokenize a COMPOUNDRULE into flag codes and '*'/'?' quantifiers.

    Long and numeric flags are written in parentheses, e.g. "(aa)(bb)*".
    """
    if flag_type == "char":
        return list(rule)

    tokens = []
    i = 0
    while i < len(rule):
        if rule[i] == "(":
            end = rule.find(")", i)
            if end == -1:
                raise DictionaryParseError(f"unbalanced parenthesis in compound rule {rule!r}")
            tokens.append(rule[i + 1 : end])
            i = end + 1
        else:
            tokens.append(rule[i])
            i += 1
    return tokens


def _parse_table_entry(directive: str, args: list[str], data: AffixData, line_number: int) -> None:
    if directive == "REP":
        if len(args) < 2:
            raise DictionaryParseError("REP entry needs a source and a target", line_number)
        data.replacement_table.append((args[0], args[1]))
    else:
        if not args:
            raise DictionaryParseError("empty COMPOUNDRULE entry", line_number)
        data.compound_rules.append(args[0])


def parse_affix_source(text: str) -> AffixData:
    """Read the tables used by the spellchecker from affix file text.

    Args:
        text: Contents of a .aff file

    Returns:
        AffixData with flag directives, REP and COMPOUNDRULE tables and TRY

    Raises:
        DictionaryParseError: On malformed directives
    """
    data = AffixData()
    pending: dict[str, int] = {}
    ignored = 0

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith(Constants.COMMENT_MARKER):
            continue

        directive, *args = line.split()

        if directive in TABLE_DIRECTIVES:
            if pending.get(directive, 0) > 0:
                _parse_table_entry(directive, args, data, line_number)
                pending[directive] -= 1
            elif args and args[0].isdigit():
                pending[directive] = int(args[0])
            else:
                raise DictionaryParseError(f"{directive} table must start with an entry count", line_number)
        elif directive == "FLAG":
            if not args or args[0] not in FLAG_TYPES:
                raise DictionaryParseError(f"unsupported FLAG type {' '.join(args)!r}", line_number)
            data.flag_type = args[0]
        elif directive in NUMERIC_DIRECTIVES:
            if not args or not args[0].isdigit():
                raise DictionaryParseError(f"{directive} needs a non-negative integer", line_number)
            data.flags[directive] = int(args[0])
        elif directive in FLAG_DIRECTIVES:
            if not args:
                raise DictionaryParseError(f"{directive} needs a flag", line_number)
            data.flags[directive] = args[0]
        elif directive == "TRY":
            data.try_characters = args[0] if args else ""
        else:
            ignored += 1

    for directive, remaining in pending.items():
        if remaining:
            logger.warning(f"{directive} table is missing {remaining} declared entries")

    if ignored:
        logger.debug(f"Ignored {ignored} affix lines not used by the spellchecker")

    return data


def parse_word_list(text: str, flag_type: str = "char") -> dict[str, list[list[str]]]:
    """Read spellings and their flags from word-list text.

    The first line may hold the entry count. Each further line is
    `word[/flags]`, optionally followed by whitespace-separated
    morphological fields, which are ignored. A repeated spelling adds a
    new homograph.

    Args:
        text: Contents of a .dic file
        flag_type: Flag encoding declared by the affix file

    Returns:
        Spelling -> list of homographs (lists of rule codes)
    """
    table: dict[str, list[list[str]]] = {}
    lines = text.splitlines()

    start = 0
    if lines and lines[0].strip().isdigit():
        start = 1

    for line_number, raw_line in enumerate(lines[start:], start=start + 1):
        line = raw_line.strip()
        if not line or line.startswith(Constants.COMMENT_MARKER):
            continue

        entry = line.split()[0]
        word, _, flag_string = entry.partition(Constants.FLAG_SEPARATOR)
        if not word:
            raise DictionaryParseError(f"missing word in entry {entry!r}", line_number)

        table.setdefault(word, []).append(parse_flags(flag_string, flag_type, line_number))

    return table


def expand_compound_rules(
    rules: list[str],
    dictionary_table: dict[str, list[list[str]]],
    flag_type: str = "char",
) -> list[str]:
    """Turn COMPOUNDRULE patterns into regular expressions over words.

    Every flag in a rule is replaced with an alternation of the words that
    carry it; '*' and '?' keep their regex meaning.
    """
    tokenized = [_split_compound_rule(rule, flag_type) for rule in rules]
    rule_flags = {token for tokens in tokenized for token in tokens if token not in ("*", "?")}

    words_by_flag: dict[str, list[str]] = {flag: [] for flag in rule_flags}
    for word, homographs in dictionary_table.items():
        codes = {code for homograph in homographs for code in homograph}
        for flag in rule_flags & codes:
            words_by_flag[flag].append(word)

    expanded = []
    for tokens in tokenized:
        parts = []
        for token in tokens:
            if token in ("*", "?"):
                parts.append(token)
            else:
                parts.append("(" + "|".join(re.escape(w) for w in words_by_flag[token]) + ")")
        expanded.append("".join(parts))
    return expanded


def build_snapshot(aff_text: str, dic_text: str) -> DictionarySnapshot:
    """Parse affix and word-list text into a snapshot.

    Args:
        aff_text: Contents of the .aff file
        dic_text: Contents of the .dic file

    Returns:
        DictionarySnapshot ready for Dictionary.from_snapshot
    """
    affix_data = parse_affix_source(aff_text)
    dictionary_table = parse_word_list(dic_text, affix_data.flag_type)
    compound_rules = expand_compound_rules(
        affix_data.compound_rules, dictionary_table, affix_data.flag_type
    )

    logger.info(
        f"Parsed {len(dictionary_table)} spellings, {len(compound_rules)} compound rules, "
        f"{len(affix_data.replacement_table)} replacements"
    )

    return DictionarySnapshot(
        dictionary_table=dictionary_table,
        flags=affix_data.flags,
        compound_rules=compound_rules,
        replacement_table=affix_data.replacement_table,
        try_characters=affix_data.try_characters,
    )
