"""Fixed lookup tables shared by discovery, resolution and classification."""

from __future__ import annotations

# Iteration order matters: the resolver tries extensions in this order.
SOURCE_EXTENSIONS: tuple[str, ...] = (
    ".ts",
    ".tsx",
    ".js",
    ".jsx",
    ".mjs",
    ".cjs",
    ".mts",
    ".cts",
    ".vue",
    ".svelte",
)

IGNORED_DIRS: frozenset[str] = frozenset({
    "node_modules", ".git", "dist", "build", ".next", ".nuxt",
    "coverage", "__pycache__", ".turbo", ".cache",
})

BUILTIN_SCHEME = "node:"

NODE_BUILTINS: frozenset[str] = frozenset({
    "assert", "buffer", "child_process", "cluster", "crypto", "dgram",
    "dns", "domain", "events", "fs", "http", "https", "net", "os", "path",
    "punycode", "querystring", "readline", "stream", "string_decoder",
    "timers", "tls", "tty", "url", "util", "v8", "vm", "zlib",
    "worker_threads", "perf_hooks", "async_hooks", "inspector",
    "trace_events", "wasi",
})
