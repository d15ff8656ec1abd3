"""Shared fixtures: a small JS/TS project written to disk or held in memory."""

from pathlib import Path

import pytest

from depgraph.scanner.filesystem import MemoryFileSystem

SAMPLE_FILES = {
    "src/index.ts": (
        "import { helper } from './util';\n"
        "import Button from './components/Button';\n"
        "import * as lib from './lib';\n"
        "import React from 'react';\n"
        "import { readFile } from 'fs';\n"
        "import path from 'node:path';\n"
        "import { map } from 'lodash/fp';\n"
        "import { thing } from '@scope/pkg/subpath';\n"
        "import './missing';\n"
        "export { default as legacy } from './legacy';\n"
        "\n"
        "const lazy = () => import('./lib/math');\n"
        "const fsAgain = require('node:fs');\n"
    ),
    "src/util.ts": (
        "import { EventEmitter } from 'events';\n"
        "export const helper = () => new EventEmitter();\n"
    ),
    "src/legacy.js": (
        "const path = require('path');\n"
        "const util = require('./util');\n"
        "module.exports = {};\n"
    ),
    "src/components/Button.tsx": (
        "import React from 'react';\n"
        "import { helper } from '../util';\n"
        "export default function Button() { return null; }\n"
    ),
    "src/lib/index.ts": "export * from './math';\n",
    "src/lib/math.ts": "export const add = (a: number, b: number) => a + b;\n",
    "node_modules/react/index.js": "module.exports = require('./cjs/react');\n",
    "dist/bundle.js": "require('./chunk');\n",
    ".hidden/secret.ts": "import './nope';\n",
    "README.md": "# sample\n",
}

# Discovery order of the local files in SAMPLE_FILES
SAMPLE_LOCAL_FILES = [
    "src/components/Button.tsx",
    "src/index.ts",
    "src/legacy.js",
    "src/lib/index.ts",
    "src/lib/math.ts",
    "src/util.ts",
]

MEMORY_ROOT = "/proj"


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    for rel, content in SAMPLE_FILES.items():
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return tmp_path


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    return MemoryFileSystem({f"{MEMORY_ROOT}/{rel}": content for rel, content in SAMPLE_FILES.items()})
