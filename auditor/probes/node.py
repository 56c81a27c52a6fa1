"""Node.js runtime probes: deprecated APIs, blocking sync calls and ESM readiness."""

from __future__ import annotations

from auditor.severity import Severity
from auditor.utils.walk import DEFAULT_EXCLUDE_DIRS

from . import Probe, ProbeRegistry

CJS_EXTENSIONS = (".js",)
ESM_EXTENSIONS = (".js", ".mjs")

DEPRECATED_APIS = ProbeRegistry(
    id="node-deprecated-apis",
    title="Deprecated APIs Found",
    description="Deprecated Node.js core API usage.",
    clean_message="No deprecated API usage detected",
    probes=(
        Probe(
            id="node.buffer-constructor",
            label="Buffer",
            pattern=r"new Buffer\(",
            severity=Severity.WARN,
            description="new Buffer() is deprecated",
            remediation="use Buffer.from() or Buffer.alloc()",
            pass_message="No new Buffer() usage found",
        ),
        Probe(
            id="node.url-parse",
            label="URL",
            pattern=r"url\.parse\(",
            severity=Severity.WARN,
            description="url.parse() is deprecated",
            remediation="use new URL()",
            pass_message="No url.parse() usage found",
        ),
        Probe(
            id="node.querystring",
            label="querystring",
            pattern=r"querystring\.(parse|stringify)\(",
            severity=Severity.WARN,
            description="querystring is deprecated",
            remediation="use URLSearchParams",
            pass_message="No querystring usage found",
        ),
        Probe(
            id="node.domain-module",
            label="domain",
            pattern=r"""(require\(['"]domain['"]|from ['"]domain['"])""",
            severity=Severity.WARN,
            description="domain module is deprecated",
            remediation="use structured error handling",
            pass_message="No domain module usage found",
        ),
        Probe(
            id="node.util-pump",
            label="util.pump",
            pattern=r"util\.pump\(",
            severity=Severity.WARN,
            description="util.pump() is deprecated",
            remediation="use stream.pipeline()",
            pass_message="No util.pump() usage found",
        ),
        Probe(
            id="node.fs-exists",
            label="fs.exists",
            pattern=r"fs\.exists\(",
            severity=Severity.WARN,
            description="fs.exists() is deprecated",
            remediation="use fs.access() or fs.stat()",
            pass_message="No fs.exists() usage found",
        ),
        Probe(
            id="node.os-tmpdir",
            label="os.tmpDir",
            pattern=r"os\.tmpDir\(",
            severity=Severity.WARN,
            description="os.tmpDir() is deprecated",
            remediation="use os.tmpdir() (lowercase)",
            pass_message="No os.tmpDir() usage found",
        ),
        Probe(
            id="node.util-type-checks",
            label="util type checks",
            pattern=r"util\.(isArray|isDate|isRegExp)\(",
            severity=Severity.WARN,
            description="util.isArray/isDate/isRegExp deprecated",
            remediation="use Array.isArray(), instanceof Date/RegExp",
            pass_message="No deprecated util type checks found",
        ),
        Probe(
            id="node.path-makelong",
            label="path._makeLong",
            pattern=r"path\._makeLong",
            severity=Severity.WARN,
            description="path._makeLong is deprecated",
            remediation="use path.toNamespacedPath()",
            pass_message="No path._makeLong usage found",
        ),
        Probe(
            id="node.sys-module",
            label="sys module",
            pattern=r"""(require\(['"]sys['"]|from ['"]sys['"])""",
            severity=Severity.WARN,
            description="sys module is deprecated",
            remediation="use util",
            pass_message="No sys module usage found",
        ),
    ),
)

SYNC_CALLS = ProbeRegistry(
    id="node-sync-calls",
    title="Synchronous Calls",
    description="Synchronous calls that block the event loop (test files excluded).",
    exclude_dirs=DEFAULT_EXCLUDE_DIRS + ("__tests__", "__mocks__"),
    exclude_files=("*test*", "*spec*"),
    clean_message="No blocking synchronous calls detected (excluding test files)",
    probes=(
        Probe(
            id="node.sync-fs",
            label="File System Sync Calls",
            pattern=(
                r"(readFileSync|writeFileSync|mkdirSync|statSync|readdirSync|existsSync|accessSync"
                r"|copyFileSync|renameSync|unlinkSync|rmSync|appendFileSync)\("
            ),
            severity=Severity.WARN,
            description="synchronous fs calls block the event loop",
            remediation="use fs/promises equivalents in hot code paths",
            pass_message="No synchronous fs calls found",
        ),
        Probe(
            id="node.sync-child-process",
            label="Child Process Sync Calls",
            pattern=r"(execSync|spawnSync|execFileSync)\(",
            severity=Severity.ERROR,
            description="synchronous child_process calls can block for extended periods",
            remediation="use exec/spawn/execFile with callbacks or promises",
            pass_message="No synchronous child_process calls found",
        ),
        Probe(
            id="node.sync-crypto",
            label="Crypto Sync Calls",
            pattern=r"(pbkdf2Sync|scryptSync)\(",
            severity=Severity.WARN,
            description="synchronous key derivation blocks the event loop",
            remediation="use crypto.pbkdf2() or crypto.scrypt()",
            pass_message="No synchronous crypto calls found",
        ),
    ),
)

ESM_COMPAT = ProbeRegistry(
    id="node-esm-compat",
    title="CJS Patterns Found",
    description="CommonJS patterns that break when a package switches to ESM.",
    extensions=ESM_EXTENSIONS,
    clean_message="Project appears ESM-ready",
    probes=(
        Probe(
            id="esm.require",
            label="require()",
            pattern=r"require\(",
            severity=Severity.WARN,
            description="require() is unavailable in ES modules",
            remediation="use import or createRequire()",
            extensions=CJS_EXTENSIONS,
        ),
        Probe(
            id="esm.module-exports",
            label="module.exports",
            pattern=r"module\.exports",
            severity=Severity.WARN,
            description="module.exports is unavailable in ES modules",
            remediation="use export default / named exports",
            extensions=CJS_EXTENSIONS,
        ),
        Probe(
            id="esm.exports-property",
            label="exports.*",
            pattern=r"exports\.",
            severity=Severity.INFO,
            description="exports.* assignments are CommonJS",
            remediation="use named exports",
            extensions=CJS_EXTENSIONS,
        ),
        Probe(
            id="esm.dirname",
            label="__dirname",
            pattern=r"__dirname",
            severity=Severity.WARN,
            description="__dirname is not defined in ES modules",
            remediation="use import.meta.dirname or fileURLToPath(import.meta.url)",
            extensions=CJS_EXTENSIONS,
        ),
        Probe(
            id="esm.filename",
            label="__filename",
            pattern=r"__filename",
            severity=Severity.WARN,
            description="__filename is not defined in ES modules",
            remediation="use import.meta.filename or fileURLToPath(import.meta.url)",
            extensions=CJS_EXTENSIONS,
        ),
        Probe(
            id="esm.missing-extension",
            label="Missing Extensions",
            pattern=r"""^\s*(import|export).*from ['"]\.\.?/[^'"]+[^.][a-zA-Z]['"]""",
            exclude=r"""\.(js|mjs|cjs|json|css|node)['"]""",
            severity=Severity.WARN,
            description="relative imports need explicit file extensions in ESM",
            remediation="add the .js extension to the specifier",
            pass_message="No missing file extensions in imports",
        ),
    ),
)

REGISTRIES = (DEPRECATED_APIS, SYNC_CALLS, ESM_COMPAT)
