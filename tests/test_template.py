from __future__ import annotations

import pytest

from bundlemaker.errors import TemplateRenderingError
from bundlemaker.template import render_template


def test_render_template_substitutes_placeholders():
    template = "namespace {{ namespace }};\nclass {{class_name}} extends Bundle"
    context = {"namespace": "Napse\\DemoBundle", "class_name": "DemoBundle"}
    rendered = render_template(template, context)
    assert rendered == "namespace Napse\\DemoBundle;\nclass DemoBundle extends Bundle"


def test_render_template_leaves_php_braces_alone():
    template = "class {{ class_name }}\n{\n    public function build(): void\n    {\n    }\n}"
    rendered = render_template(template, {"class_name": "Demo"})
    assert rendered == "class Demo\n{\n    public function build(): void\n    {\n    }\n}"


def test_render_template_rejects_missing_values():
    with pytest.raises(TemplateRenderingError, match="class_name"):
        render_template("class {{ class_name }}", {})
