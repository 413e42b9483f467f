from flask import Blueprint

learn = Blueprint("learn", __name__)

from nextmastery.learn import routes  # noqa: E402,F401
