from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from .validation import parse_skills_input, validate_skills


def register(app: Flask, container: Container) -> None:
    @app.route("/api/skills/validate", methods=["POST"], endpoint="skills_validate")
    def skills_validate():
        raw = json_body().get("skills", "")
        if isinstance(raw, str):
            skills = parse_skills_input(raw)
        elif isinstance(raw, list) and all(isinstance(s, str) for s in raw):
            skills = raw
        else:
            return jsonify({"errors": ["skills must be a string or a list of strings"]}), 400

        result = validate_skills(skills)
        return jsonify({"valid": result.valid, "errors": result.errors, "normalized": result.normalized})
