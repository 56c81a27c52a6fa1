"""LiftKit probes: hardcoded design values and raw HTML elements."""

from __future__ import annotations

from auditor.severity import Severity

from . import Probe, ProbeRegistry

JSX_EXTENSIONS = (".tsx", ".jsx")
STYLE_EXTENSIONS = (".tsx", ".jsx", ".css")
CSS_EXTENSIONS = (".css",)
COMMENT_LINE = r"^\s*//"

TOKENS = ProbeRegistry(
    id="liftkit-tokens",
    title="Hardcoded Colors",
    description="Colors that should use LiftKit design tokens.",
    extensions=STYLE_EXTENSIONS,
    clean_message="All colors use LiftKit tokens",
    probes=(
        Probe(
            id="liftkit.hex-color",
            label="Hardcoded Hex Colors",
            pattern=r"#[0-9a-fA-F]{3,8}\b",
            exclude=COMMENT_LINE,
            severity=Severity.WARN,
            description="hex color literal",
            remediation="use LiftKit color tokens (e.g., color='primary')",
            pass_message="No hardcoded hex colors found",
        ),
        Probe(
            id="liftkit.color-function",
            label="CSS Color Functions",
            pattern=r"\b(rgb|rgba|hsl|hsla)\s*\(",
            exclude=COMMENT_LINE,
            severity=Severity.WARN,
            description="CSS color function",
            remediation="use LiftKit color tokens (e.g., color='primary')",
            pass_message="No hardcoded color functions found",
        ),
        Probe(
            id="liftkit.color-keyword",
            label="Hardcoded Color Keywords in Style Props",
            pattern=(
                r"""(color|backgroundColor|background|borderColor)\s*[:=]\s*["']"""
                r"""(red|blue|green|yellow|orange|purple|pink|white|black|gray|grey)["']"""
            ),
            severity=Severity.WARN,
            description="named color keyword in a style prop",
            remediation="use LiftKit color tokens (e.g., color='primary')",
            extensions=JSX_EXTENSIONS,
            pass_message="No hardcoded color keywords found in style props",
        ),
    ),
)

RESPONSIVE = ProbeRegistry(
    id="liftkit-responsive",
    title="Responsive Design",
    description="Fixed pixel sizes and non-responsive grids.",
    extensions=STYLE_EXTENSIONS,
    clean_message="Layouts use LiftKit spacing tokens",
    probes=(
        Probe(
            id="liftkit.inline-px",
            label="Hardcoded Pixels in Inline Styles",
            pattern=r"""(width|height|margin|padding|top|left|right|bottom)\s*:\s*["'][0-9]+px""",
            severity=Severity.WARN,
            description="hardcoded px in inline style",
            remediation="use LiftKit spacing tokens",
            extensions=JSX_EXTENSIONS,
            pass_message="No hardcoded pixel values in inline styles",
        ),
        Probe(
            id="liftkit.css-px",
            label="Hardcoded Pixels in CSS",
            pattern=r"(width|height|margin|padding|max-width|min-width|max-height|min-height)\s*:\s*[2-9][0-9]+px",
            severity=Severity.WARN,
            description="hardcoded px in CSS",
            remediation="use LiftKit spacing tokens",
            extensions=CSS_EXTENSIONS,
            pass_message="No hardcoded pixel values in CSS files",
        ),
        Probe(
            id="liftkit.grid-autoresponsive",
            label="Grid Without autoResponsive",
            pattern=r"<Grid\b",
            exclude=r"autoResponsive",
            severity=Severity.INFO,
            description="Grid without autoResponsive",
            remediation="consider adding the autoResponsive prop",
            extensions=JSX_EXTENSIONS,
            pass_message="All Grid components use autoResponsive (or none found)",
        ),
    ),
)


def _element_probe(tag: str, component: str) -> Probe:
    return Probe(
        id=f"liftkit.raw-{tag}",
        label=f"<{tag}>",
        pattern=rf"<{tag}\b",
        severity=Severity.INFO,
        description=f"raw <{tag}> element",
        remediation=f"consider using LiftKit <{component}>",
        pass_message=f"No raw <{tag}> elements found",
    )


COMPONENTS = ProbeRegistry(
    id="liftkit-components",
    title="Raw HTML Elements Replaceable by LiftKit",
    description="Raw HTML elements with a LiftKit component equivalent.",
    extensions=JSX_EXTENSIONS,
    clean_message="No raw HTML elements found that could use LiftKit components",
    probes=(
        _element_probe("button", "Button"),
        _element_probe("input", "TextInput"),
        _element_probe("select", "Select"),
        _element_probe("nav", "NavBar"),
        _element_probe("img", "Image"),
    ),
)

REGISTRIES = (TOKENS, RESPONSIVE, COMPONENTS)
