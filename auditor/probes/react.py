"""React probes covering React 19 removals, hook misuse and bundle size."""

from __future__ import annotations

from auditor.severity import Severity

from . import JS_TS_EXTENSIONS, Probe, ProbeRegistry

DEPRECATED_APIS = ProbeRegistry(
    id="react-deprecated-apis",
    title="Deprecated React APIs",
    description="APIs removed or deprecated in React 19.",
    extensions=JS_TS_EXTENSIONS,
    clean_message="No deprecated API usage detected",
    probes=(
        Probe(
            id="react.find-dom-node",
            label="findDOMNode",
            pattern=r"(ReactDOM\.)?findDOMNode\(",
            severity=Severity.ERROR,
            description="findDOMNode is removed in React 19",
            remediation="use useRef",
            pass_message="No findDOMNode usage found",
        ),
        Probe(
            id="react.unsafe-lifecycle",
            label="UNSAFE_ lifecycle methods",
            pattern=r"UNSAFE_(componentWillMount|componentWillReceiveProps|componentWillUpdate)",
            severity=Severity.ERROR,
            description="UNSAFE_ lifecycle methods are removed in React 19",
            remediation="refactor to useEffect or derived state",
            pass_message="No UNSAFE_ lifecycle methods found",
        ),
        Probe(
            id="react.string-refs",
            label="String refs",
            pattern=r'ref="[^"]*"',
            severity=Severity.ERROR,
            description="String refs are removed in React 19",
            remediation="use useRef or callback refs",
            pass_message="No string refs found",
        ),
        Probe(
            id="react.default-props",
            label="defaultProps on function components",
            pattern=r"\w+\.defaultProps\s*=",
            severity=Severity.WARN,
            description="defaultProps on functions is deprecated in React 19",
            remediation="use ES default parameters",
            pass_message="No defaultProps assignments found",
        ),
        Probe(
            id="react.prop-types",
            label="PropTypes",
            pattern=r"(PropTypes\.\w+|\.propTypes\s*=)",
            severity=Severity.WARN,
            description="PropTypes are removed from React 19",
            remediation="use TypeScript types",
            pass_message="No PropTypes usage found",
        ),
        Probe(
            id="react.legacy-context",
            label="Legacy Context (contextTypes / childContextTypes)",
            pattern=r"(contextTypes|childContextTypes|getChildContext)\s*=",
            severity=Severity.ERROR,
            description="Legacy context API is removed in React 19",
            remediation="use createContext/useContext",
            pass_message="No legacy context API usage found",
        ),
        Probe(
            id="react.forward-ref",
            label="forwardRef (simplified in React 19)",
            pattern=r"(React\.)?forwardRef\(",
            severity=Severity.INFO,
            description="in React 19 ref is passed as a regular prop",
            remediation="drop forwardRef and accept ref in props",
            pass_message="No forwardRef usage found",
        ),
        Probe(
            id="react.create-factory",
            label="React.createFactory",
            pattern=r"(React\.)?createFactory\(",
            severity=Severity.ERROR,
            description="createFactory is removed in React 19",
            remediation="use JSX",
            pass_message="No createFactory usage found",
        ),
        Probe(
            id="react.legacy-render",
            label="ReactDOM.render (legacy root API)",
            pattern=r"ReactDOM\.render\(",
            severity=Severity.ERROR,
            description="ReactDOM.render is removed in React 19",
            remediation="use createRoot().render()",
            pass_message="No legacy ReactDOM.render found",
        ),
        Probe(
            id="react.legacy-hydrate",
            label="ReactDOM.hydrate (legacy hydration)",
            pattern=r"ReactDOM\.hydrate\(",
            severity=Severity.ERROR,
            description="ReactDOM.hydrate is removed in React 19",
            remediation="use hydrateRoot()",
            pass_message="No legacy ReactDOM.hydrate found",
        ),
    ),
)

PATTERNS = ProbeRegistry(
    id="react-patterns",
    title="React Anti-Pattern Detection",
    description="Common hook and rendering anti-patterns.",
    extensions=JS_TS_EXTENSIONS,
    clean_message="No major anti-patterns detected",
    probes=(
        Probe(
            id="react.effect-review",
            label="useEffect with empty dependency analysis",
            pattern=r"useEffect\(\s*\(\)\s*=>",
            severity=Severity.INFO,
            description="useEffect call(s) found",
            remediation="review dependency arrays for correctness",
            pass_message="No useEffect calls found to review",
        ),
        Probe(
            id="react.conditional-hook",
            label="useState in loops/conditions",
            pattern=r"(for\s*\(|while\s*\(|if\s*\().*useState\(",
            severity=Severity.WARN,
            description="Hooks must not be called inside loops or conditions",
            remediation="move to top level",
            pass_message="No conditional hook calls detected",
        ),
        Probe(
            id="react.direct-dom",
            label="Direct DOM manipulation",
            pattern=r"document\.(getElementById|querySelector|querySelectorAll|getElementsBy)\(",
            severity=Severity.WARN,
            description="direct DOM access bypasses React",
            remediation="use useRef instead",
            pass_message="No direct DOM manipulation found",
        ),
        Probe(
            id="react.index-key",
            label="Index as key in lists",
            pattern=r"key=\{(index|i|idx)\}",
            severity=Severity.WARN,
            description="index-as-key breaks reconciliation on reorder",
            remediation="use stable unique IDs instead",
            pass_message="No index-as-key usage found",
        ),
        Probe(
            id="react.async-effect",
            label="Async useEffect",
            pattern=r"useEffect\(\s*async",
            severity=Severity.WARN,
            description="useEffect callback must not be async",
            remediation="define async function inside and call it",
            pass_message="No async useEffect callbacks found",
        ),
        Probe(
            id="react.effect-set-state",
            label="setState in useEffect without cleanup",
            pattern=r"useEffect\(.*set[A-Z]\w*\(",
            severity=Severity.INFO,
            description="setState in useEffect",
            remediation="verify cleanup to prevent stale updates",
            pass_message="No setState-in-useEffect patterns to review",
        ),
        Probe(
            id="react.inline-style",
            label="Inline object/array creation in JSX",
            pattern=r"style=\{\{",
            severity=Severity.WARN,
            description="inline style objects are recreated every render",
            remediation="extract to const or use CSS modules to avoid re-renders",
            pass_message="No inline style objects found",
        ),
        Probe(
            id="react.nested-ternary",
            label="Nested ternaries in JSX",
            pattern=r"\?\s*.*\?\s*.*:",
            severity=Severity.WARN,
            description="nested ternaries are hard to read",
            remediation="extract to helper or use early returns",
            pass_message="No nested ternaries found",
        ),
    ),
)

BUNDLE_IMPORTS = ProbeRegistry(
    id="react-bundle-imports",
    title="Bundle Import Analysis",
    description="Imports that defeat tree-shaking or bloat the bundle.",
    extensions=JS_TS_EXTENSIONS,
    clean_message="No problematic import patterns detected",
    probes=(
        Probe(
            id="bundle.barrel-index",
            label="Barrel imports (index files)",
            pattern=r"""from ['"]\.\.?/[^'"]*/?index['"]""",
            severity=Severity.WARN,
            description="barrel imports from index files",
            remediation="import directly from source modules",
            pass_message="No barrel imports from index files found",
        ),
        Probe(
            id="bundle.lodash-full",
            label="Large library full imports",
            pattern=r"""import\s+\w+\s+from\s+['"]lodash['"]""",
            severity=Severity.WARN,
            description="full lodash import",
            remediation="use 'lodash/functionName' or lodash-es",
            pass_message="No full lodash imports found",
        ),
        Probe(
            id="bundle.mui-barrel",
            label="Material UI full imports",
            pattern=r"""from ['"]@mui/material['"]""",
            severity=Severity.WARN,
            description="MUI barrel import",
            remediation="use '@mui/material/ComponentName' for better tree-shaking",
            pass_message="No MUI barrel imports found",
        ),
        Probe(
            id="bundle.moment",
            label="moment.js usage",
            pattern=r"""(from ['"]moment['"]|require\(['"]moment['"])""",
            severity=Severity.WARN,
            description="moment.js import",
            remediation="consider date-fns or dayjs for smaller bundle",
            pass_message="No moment.js imports found",
        ),
        Probe(
            id="bundle.wildcard-reexport",
            label="Wildcard re-exports",
            pattern=r"export\s+\*\s+from",
            severity=Severity.WARN,
            description="wildcard re-export",
            remediation="use named exports for better tree-shaking",
            pass_message="No wildcard re-exports found",
        ),
        Probe(
            id="bundle.heavy-library",
            label="Dynamic import opportunities",
            pattern=r"""from ['"](@react-pdf|chart\.js|recharts|three|monaco-editor)['"/]""",
            severity=Severity.INFO,
            description="heavy library import",
            remediation="consider lazy loading with React.lazy()",
            pass_message="No heavy library imports that need lazy loading",
        ),
    ),
)

CLASS_COMPONENTS = ProbeRegistry(
    id="react-class-components",
    title="Class Component Detection",
    description="Class components that could become function components.",
    extensions=JS_TS_EXTENSIONS,
    clean_message="No class components detected - project uses modern function components",
    probes=(
        Probe(
            id="class.extends-component",
            label="extends Component",
            pattern=r"class\s+\w+\s+extends\s+(React\.)?Component",
            severity=Severity.WARN,
            description="class component extending Component",
            remediation="convert to function components with hooks",
            pass_message="No class components extending Component found",
        ),
        Probe(
            id="class.extends-pure-component",
            label="extends PureComponent",
            pattern=r"class\s+\w+\s+extends\s+(React\.)?PureComponent",
            severity=Severity.WARN,
            description="PureComponent",
            remediation="convert to function components (React Compiler handles memoization)",
            pass_message="No PureComponent usage found",
        ),
        Probe(
            id="class.did-lifecycle",
            label="componentDidMount / componentDidUpdate / componentDidCatch",
            pattern=r"componentDid(Mount|Update|Catch)\s*\(",
            severity=Severity.WARN,
            description="lifecycle method",
            remediation="replace with useEffect or error boundaries",
            pass_message="No lifecycle methods found",
        ),
        Probe(
            id="class.will-unmount",
            label="componentWillUnmount",
            pattern=r"componentWillUnmount\s*\(",
            severity=Severity.WARN,
            description="componentWillUnmount",
            remediation="replace with useEffect cleanup",
            pass_message="No componentWillUnmount found",
        ),
        Probe(
            id="class.should-update",
            label="shouldComponentUpdate",
            pattern=r"shouldComponentUpdate\s*\(",
            severity=Severity.WARN,
            description="shouldComponentUpdate",
            remediation="React Compiler handles this automatically",
            pass_message="No shouldComponentUpdate found",
        ),
        Probe(
            id="class.set-state",
            label="this.setState",
            pattern=r"this\.setState\(",
            severity=Severity.WARN,
            description="this.setState call",
            remediation="replace with useState hook",
            pass_message="No this.setState calls found",
        ),
    ),
)

REGISTRIES = (DEPRECATED_APIS, PATTERNS, BUNDLE_IMPORTS, CLASS_COMPONENTS)
