"""
API documentation controller - serves the OpenAPI document and a Swagger UI page.
"""

from flask import Blueprint, jsonify, render_template_string, url_for

from scheduler_api.core.openapi import API_TITLE, build_openapi_spec

docs_bp = Blueprint("docs", __name__, url_prefix="/api-docs")

SWAGGER_UI_VERSION = "5.17.14"

_SWAGGER_UI_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ title }}</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@{{ version }}/swagger-ui.css">
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@{{ version }}/swagger-ui-bundle.js"></script>
  <script>
    window.ui = SwaggerUIBundle({ url: "{{ spec_url }}", dom_id: "#swagger-ui" });
  </script>
</body>
</html>
"""


@docs_bp.route("", methods=["GET"])
def swagger_ui():
    return render_template_string(
        _SWAGGER_UI_PAGE,
        title=API_TITLE,
        version=SWAGGER_UI_VERSION,
        spec_url=url_for("docs.openapi_json"),
    )


@docs_bp.route("/openapi.json", methods=["GET"])
def openapi_json():
    return jsonify(build_openapi_spec()), 200
