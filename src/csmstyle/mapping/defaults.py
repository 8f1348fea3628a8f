"""Starting rule → principle table for the Google Java style ruleset.

Keys are Checkstyle check names without the ``Check`` suffix. The table is a
default, not a contract: operators override, extend or clear it through the
mapping file, ``[mappings.rules]`` in ``.csmstyle.toml`` or the interactive
menu. Section numbers refer to the Google Java Style Guide.
"""

from __future__ import annotations

from typing import Tuple

from csmstyle.mapping.principles import Principle

SeedEntry = Tuple[str, Principle]

CLEAR_LAYOUT_RULES: Tuple[SeedEntry, ...] = (
    ("NoLineWrap", Principle.CLEAR_LAYOUT),  # 3.2, 3.3.2
    ("CustomImportOrder", Principle.CLEAR_LAYOUT),  # 3.3.3
    ("OneTopLevelClass", Principle.CLEAR_LAYOUT),  # 3.4.1
    ("OverloadMethodsDeclarationOrder", Principle.CLEAR_LAYOUT),  # 3.4.2.1
    ("ConstructorsDeclarationGrouping", Principle.CLEAR_LAYOUT),  # 3.4.2.1
    ("RegexpSinglelineJava", Principle.CLEAR_LAYOUT),  # 4.1.3
    ("LineLength", Principle.CLEAR_LAYOUT),  # 4.4
    ("OperatorWrap", Principle.CLEAR_LAYOUT),  # 4.5.1
    ("SeparatorWrap", Principle.CLEAR_LAYOUT),  # 4.5.1
    ("VariableDeclarationUsageDistance", Principle.CLEAR_LAYOUT),  # 4.8.2.2
    ("AnnotationLocation", Principle.CLEAR_LAYOUT),  # 4.8.5.2 - 4.8.5.4
    ("InvalidJavadocPosition", Principle.CLEAR_LAYOUT),  # 4.8.5.2
    ("CommentsIndentation", Principle.CLEAR_LAYOUT),  # 4.8.6.1
    ("PackageName", Principle.CLEAR_LAYOUT),  # 5.2.1
)

EXPLANATORY_LANGUAGE_RULES: Tuple[SeedEntry, ...] = (
    ("OuterTypeFilename", Principle.EXPLANATORY_LANGUAGE),  # 2.1
    ("FileTabCharacter", Principle.EXPLANATORY_LANGUAGE),  # 2.3.1
    ("IllegalTokenText", Principle.EXPLANATORY_LANGUAGE),  # 2.3.2
    ("AvoidEscapedUnicodeCharacters", Principle.EXPLANATORY_LANGUAGE),  # 2.3.3
    ("AvoidStarImport", Principle.EXPLANATORY_LANGUAGE),  # 3.3.1
    ("FallThrough", Principle.EXPLANATORY_LANGUAGE),  # 4.8.4.2
    ("TodoComment", Principle.EXPLANATORY_LANGUAGE),
    ("UpperEll", Principle.EXPLANATORY_LANGUAGE),  # 4.8.8
    ("CatchParameterName", Principle.EXPLANATORY_LANGUAGE),  # 5.1
    ("TypeName", Principle.EXPLANATORY_LANGUAGE),  # 5.2.2
    ("MethodName", Principle.EXPLANATORY_LANGUAGE),  # 5.2.3
)

SIMPLE_CONSTRUCTS_RULES: Tuple[SeedEntry, ...] = (
    ("MultipleVariableDeclarations", Principle.SIMPLE_CONSTRUCTS),  # 4.8.2.1
)

BE_CONSISTENT_RULES: Tuple[SeedEntry, ...] = (
    ("EmptyLineSeparator", Principle.BE_CONSISTENT),  # 3, 4.6.1
    ("NeedBraces", Principle.BE_CONSISTENT),  # 4.1.1
    ("LeftCurly", Principle.BE_CONSISTENT),  # 4.1.2
    ("RightCurly", Principle.BE_CONSISTENT),  # 4.1.2
    ("Indentation", Principle.BE_CONSISTENT),  # 4.2, 4.5.2, 4.8.4.1
    ("OneStatementPerLine", Principle.BE_CONSISTENT),  # 4.3
    ("WhitespaceAround", Principle.BE_CONSISTENT),  # 4.6.2
    ("GenericWhitespace", Principle.BE_CONSISTENT),  # 4.6.2
    ("MethodParamPad", Principle.BE_CONSISTENT),  # 4.6.2
    ("ParenPad", Principle.BE_CONSISTENT),  # 4.6.2
    ("WhitespaceAfter", Principle.BE_CONSISTENT),  # 4.6.2
    ("NoWhitespaceBefore", Principle.BE_CONSISTENT),  # 4.6.2
    ("NoWhitespaceBeforeCaseDefaultColon", Principle.BE_CONSISTENT),  # 4.6.2
    ("MatchXpath", Principle.BE_CONSISTENT),  # 4.6.2
    ("ArrayTypeStyle", Principle.BE_CONSISTENT),  # 4.8.3.2
    ("ModifierOrder", Principle.BE_CONSISTENT),  # 4.8.7
)

CONGRUENT_IMPLEMENTATION_RULES: Tuple[SeedEntry, ...] = (
    ("EmptyCatchBlock", Principle.CONGRUENT_IMPLEMENTATION),  # 6.2
)

DEFAULT_SEED: Tuple[SeedEntry, ...] = (
    *CLEAR_LAYOUT_RULES,
    *EXPLANATORY_LANGUAGE_RULES,
    *SIMPLE_CONSTRUCTS_RULES,
    *BE_CONSISTENT_RULES,
    *CONGRUENT_IMPLEMENTATION_RULES,
)

__all__ = ["DEFAULT_SEED", "SeedEntry"]
