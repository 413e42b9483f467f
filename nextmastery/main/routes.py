from flask import Blueprint, Response, current_app, render_template

from nextmastery.codeblock import code_stylesheet
from nextmastery.learn.registry import registry

main = Blueprint('main', __name__)


@main.route("/")
@main.route("/home")
def home():
    return render_template('home.html', courses=registry.courses)


@main.route("/code.css")
def code_css():
    css = code_stylesheet(current_app.config.get("CODEBLOCK_STYLE", "monokai"))
    return Response(css, mimetype="text/css")
