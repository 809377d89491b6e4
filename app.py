import os
import time

import click
from flask import Flask, request, jsonify, abort

from services.spell_service import SpellCheckerService
from services.tokenizer import DEFAULT_ALPHABET


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_mapping(
        ALPHABET=DEFAULT_ALPHABET,
        MAX_TEXT_LENGTH=10000,
        CORPUS_PATH=None,
        SEED_DICTIONARY=True,
    )
    app.config.from_prefixed_env(prefix="SPELL")
    if config:
        app.config.update(config)

    spell_service = SpellCheckerService(app.config["ALPHABET"])
    if app.config["SEED_DICTIONARY"]:
        spell_service.seed_dictionary("en")
    if app.config["CORPUS_PATH"]:
        spell_service.train_file(app.config["CORPUS_PATH"])
    app.extensions["spell_service"] = spell_service

    def payload():
        # Accept form data or JSON body for flexibility
        if request.form:
            return request.form
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    def checked_text():
        text = payload().get("text")
        if not isinstance(text, str) or not text.strip():
            abort(400, description="No text provided")
        if len(text) > app.config["MAX_TEXT_LENGTH"]:
            abort(413, description="Input too large")
        return text

    @app.errorhandler(400)
    @app.errorhandler(413)
    def bad_input(err):
        return jsonify({"error": err.description}), err.code

    @app.route("/train", methods=["POST"])
    def train():
        spell_service.train(checked_text())
        return jsonify(spell_service.stats())

    @app.route("/correct", methods=["POST"])
    def correct():
        word = payload().get("word")
        if not isinstance(word, str):
            abort(400, description="No word provided")
        return jsonify({"word": word, "correction": spell_service.correct(word)})

    @app.route("/check", methods=["POST"])
    def check_spelling():
        text = checked_text()
        t0 = time.time()
        result = spell_service.process_text(text)
        t1 = time.time()
        app.logger.info("PERF: Process=%.1fms | TextLen=%d", (t1 - t0) * 1000, len(text))
        return jsonify({"tokens": result["tokens"]})

    @app.route("/stats")
    def stats():
        return jsonify(spell_service.stats())

    @app.cli.command("correct")
    @click.argument("training_file", type=click.Path(exists=True, dir_okay=False))
    @click.argument("word")
    def correct_command(training_file, word):
        """Train on TRAINING_FILE and print the correction for WORD."""
        service = SpellCheckerService(app.config["ALPHABET"])
        service.train_file(training_file)
        click.echo(f"{word} -> {service.correct(word)}")

    return app


app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=True, use_reloader=False)
