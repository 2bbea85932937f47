"""Bundled template bodies, one function per template id."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from frontgen.core.configuration import (
    Configuration,
    JsOption,
    TestFramework,
)
from frontgen.core.paths import slugify
from frontgen.core.requests import GenerationRequest

_WORD_RE = re.compile(r"[A-Za-z0-9]+")


def classify(name: str) -> str:
    """Turn a free-form name into a class-style identifier ("my page" -> "MyPage")."""
    return "".join(word[:1].upper() + word[1:] for word in _WORD_RE.findall(name))


def camelize(name: str) -> str:
    """Like classify, with a lower-case first letter ("my page" -> "myPage")."""
    classified = classify(name)
    return classified[:1].lower() + classified[1:]


@dataclass(frozen=True)
class RenderContext:
    """Values substituted into templates.

    Attributes:
        project_name: From the project settings.
        name: Name as typed on the command line.
        slug: File-name form of the name.
        class_name: Class-style identifier derived from the name.
        view_type: page, component or template.
        use_template: Page extends the shared layout.
        no_import: Skip the stylesheet/script import line.
        use_dashboard: Register the page on the dashboard.
        js_option: Module loader (none, browserify, requirejs).
        test_framework: mocha or jasmine.
    """

    project_name: str
    name: str
    slug: str
    class_name: str
    view_type: str = "page"
    use_template: bool = False
    no_import: bool = False
    use_dashboard: bool = False
    js_option: JsOption = JsOption.NONE
    test_framework: TestFramework = TestFramework.MOCHA

    @classmethod
    def from_request(
        cls, config: Configuration, request: GenerationRequest,
    ) -> RenderContext:
        """Build the context; the dashboard flag is on if either source enables it."""
        return cls(
            project_name=config.project_name,
            name=request.name.strip(),
            slug=slugify(request.name),
            class_name=classify(request.name),
            view_type=request.view_type.value,
            use_template=request.options.use_template,
            no_import=request.options.no_import,
            use_dashboard=request.options.dashboard or config.use_dashboard,
            js_option=config.js_option,
            test_framework=config.test_framework,
        )


# ---------------------------------------------------------------------------
# HTML views
# ---------------------------------------------------------------------------


def _view_jade(ctx: RenderContext) -> str:
    if ctx.view_type != "page":
        return f"//- {ctx.class_name} {ctx.view_type}\n.{ctx.slug}\n  p {ctx.name}\n"
    layout = "templates/base" if ctx.use_template else "layout"
    lines = [f"extends {layout}", ""]
    if ctx.use_dashboard:
        lines += ["//- dashboard: true", ""]
    lines += [
        "block content",
        f"  section.{ctx.slug}",
        f"    h1 {ctx.name}",
        "",
    ]
    return "\n".join(lines)


def _view_swig(ctx: RenderContext) -> str:
    if ctx.view_type != "page":
        return f'<div class="{ctx.slug}">\n  <p>{ctx.name}</p>\n</div>\n'
    layout = "templates/base.swig" if ctx.use_template else "layout.swig"
    dashboard = "{# dashboard: true #}\n" if ctx.use_dashboard else ""
    return f"""{{% extends '{layout}' %}}
{dashboard}
{{% block content %}}
<section class="{ctx.slug}">
  <h1>{ctx.name}</h1>
</section>
{{% endblock %}}
"""


def _view_html(ctx: RenderContext) -> str:
    stylesheet = "" if ctx.no_import else '  <link rel="stylesheet" href="styles/main.css">\n'
    return f"""<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>{ctx.name} | {ctx.project_name}</title>
{stylesheet}</head>
<body>
  <section class="{ctx.slug}">
    <h1>{ctx.name}</h1>
  </section>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Single page app views
# ---------------------------------------------------------------------------


def _view_js(ctx: RenderContext) -> str:
    view = f"{ctx.class_name}View"
    body = f"""var {view} = Backbone.View.extend({{

    el: '.{ctx.slug}',

    template: JST['{ctx.slug}'],

    events: {{}},

    initialize: function() {{
        this.render();
    }},

    render: function() {{
        this.$el.html(this.template());
        return this;
    }}

}});
"""
    return _as_module(body, view, ctx.js_option)


def _as_module(body: str, export: str, js_option: JsOption) -> str:
    """Wrap a script body in the form the project's module loader expects."""
    if js_option is JsOption.REQUIREJS:
        indented = "".join(f"    {line}" if line else line for line in body.splitlines(True))
        return (
            "define(function (require) {\n    'use strict';\n\n"
            + indented
            + f"\n    return {export};\n}});\n"
        )
    if js_option is JsOption.BROWSERIFY:
        return f"'use strict';\n\n{body}\nmodule.exports = {export};\n"
    return f"'use strict';\n\n{body}"


def _view_spec_js(ctx: RenderContext) -> str:
    view = f"{ctx.class_name}View"
    assertion = (
        "expect(this.view).toBeDefined();"
        if ctx.test_framework is TestFramework.JASMINE
        else "expect(this.view).to.be.ok;"
    )
    return f"""/*global describe, beforeEach, it*/
'use strict';

describe('{view}', function () {{

    beforeEach(function () {{
        this.view = new {view}();
    }});

    it('renders', function () {{
        {assertion}
    }});

}});
"""


def _template_jst(ctx: RenderContext) -> str:
    return f'<div class="{ctx.slug}">\n  <p><%= name %></p>\n</div>\n'


def _template_hbs(ctx: RenderContext) -> str:
    return f'<div class="{ctx.slug}">\n  <p>{{{{name}}}}</p>\n</div>\n'


def _template_jade(ctx: RenderContext) -> str:
    return f".{ctx.slug}\n  p= name\n"


# ---------------------------------------------------------------------------
# Single page app models
# ---------------------------------------------------------------------------


def _model_js(ctx: RenderContext) -> str:
    model = f"{ctx.class_name}Model"
    body = f"""var {model} = Backbone.Model.extend({{

    url: '',

    initialize: function() {{
    }},

    defaults: {{
    }},

    validate: function(attrs, options) {{
    }},

    parse: function(response, options) {{
        return response;
    }}

}});
"""
    header = f"/**\n *   {model} Description\n */\n"
    return header + _as_module(body, model, ctx.js_option)


def _model_spec_js(ctx: RenderContext) -> str:
    model = f"{ctx.class_name}Model"
    assertion = (
        "expect(this.model).toBeDefined();"
        if ctx.test_framework is TestFramework.JASMINE
        else "expect(this.model).to.be.ok;"
    )
    return f"""/*global describe, beforeEach, it*/
'use strict';

describe('{model}', function () {{

    beforeEach(function () {{
        this.model = new {model}();
    }});

    it('is created', function () {{
        {assertion}
    }});

}});
"""


# ---------------------------------------------------------------------------
# Angular factories
# ---------------------------------------------------------------------------


def _factory_js(ctx: RenderContext) -> str:
    factory = camelize(ctx.name)
    return f"""'use strict';

angular.module('{camelize(ctx.project_name)}')
    .factory('{factory}', function () {{

        var meaningOfLife = 42;

        return {{
            someMethod: function () {{
                return meaningOfLife;
            }}
        }};
    }});
"""


def _factory_spec_js(ctx: RenderContext) -> str:
    factory = camelize(ctx.name)
    assertion = (
        "expect(!!factory).toBe(true);"
        if ctx.test_framework is TestFramework.JASMINE
        else "expect(!!factory).to.equal(true);"
    )
    return f"""'use strict';

describe('Factory: {factory}', function () {{

    beforeEach(module('{camelize(ctx.project_name)}'));

    var factory;
    beforeEach(inject(function (_{factory}_) {{
        factory = _{factory}_;
    }}));

    it('should do something', function () {{
        {assertion}
    }});

}});
"""


_RENDERERS: dict[str, Callable[[RenderContext], str]] = {
    "view.jade": _view_jade,
    "view.swig": _view_swig,
    "view.html": _view_html,
    "view.js": _view_js,
    "view-spec.js": _view_spec_js,
    "template.jst": _template_jst,
    "template.hbs": _template_hbs,
    "template.jade": _template_jade,
    "model.js": _model_js,
    "model-spec.js": _model_spec_js,
    "factory.js": _factory_js,
    "factory.spec.js": _factory_spec_js,
}


def template_ids() -> list[str]:
    """Return every bundled template id."""
    return sorted(_RENDERERS)


def render_template(template_id: str, context: RenderContext) -> str:
    """Render a bundled template.

    Raises:
        KeyError: If no template is bundled under ``template_id``.
    """
    renderer = _RENDERERS.get(template_id)
    if renderer is None:
        raise KeyError(f"Unknown template id: {template_id}")
    return renderer(context)
