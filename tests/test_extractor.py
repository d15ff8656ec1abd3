"""Tests for reference extraction."""

from depgraph.extractor import extract_references


def test_all_three_forms_in_text_order():
    source = "import x from './a'; import('./b'); const c = require('./c'); import './d';"
    assert extract_references(source) == ["./a", "./b", "./c", "./d"]


def test_duplicates_keep_first_position():
    source = (
        "import a from './a';\n"
        "const again = require('./a');\n"
        "import('./b');\n"
        "import b from './b';\n"
    )
    assert extract_references(source) == ["./a", "./b"]


def test_static_import_shapes():
    source = """
import Default from 'default-pkg';
import { a, b as c } from "named-pkg";
import * as ns from './ns';
import type { T } from './types';
import Foo, { bar } from '../foo';
import {
  multi,
  line,
} from './multi';
"""
    assert extract_references(source) == [
        "default-pkg", "named-pkg", "./ns", "./types", "../foo", "./multi",
    ]


def test_reexports():
    source = """
export * from './all';
export { thing } from './thing';
export { default as Other } from "@scope/other";
"""
    assert extract_references(source) == ["./all", "./thing", "@scope/other"]


def test_side_effect_import_followed_by_named_import():
    source = "import './polyfill'\nimport x from './x'\n"
    assert extract_references(source) == ["./polyfill", "./x"]


def test_comments_inside_binding_clause():
    line_comment = "import {\n  a, // don't touch\n  b,\n} from './x';\n"
    block_comment = "import {\n  a /* it's */,\n} from './y';\n"
    assert extract_references(line_comment) == ["./x"]
    assert extract_references(block_comment) == ["./y"]


def test_comment_with_quote_does_not_join_statements():
    source = "import './a' // it's needed\nimport b from './b';\n"
    assert extract_references(source) == ["./a", "./b"]


def test_dynamic_and_require_allow_whitespace():
    source = "await import ( './lazy' );\nconst m = require(\n  \"module-name\"\n);"
    assert extract_references(source) == ["./lazy", "module-name"]


def test_plain_exports_are_not_references():
    source = """
export const greeting = 'hello';
export default function main() { return "world"; }
export { a, b };
"""
    assert extract_references(source) == []


def test_identifiers_containing_keywords_are_ignored():
    source = "myrequire('./no'); reimport('./no2'); const exported = 'x';"
    assert extract_references(source) == []


def test_matches_inside_comments_are_reported():
    source = "// const legacy = require('./old');\nimport a from './a';"
    assert extract_references(source) == ["./old", "./a"]


def test_empty_source():
    assert extract_references("") == []
