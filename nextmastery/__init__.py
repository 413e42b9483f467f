import logging

from flask import Flask, has_request_context, render_template, request

from nextmastery.config import Config


def page_not_found(error):
    return render_template('errors/404.html', title='Page Not Found'), 404


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    app.logger.setLevel(getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    from nextmastery.main.routes import main
    from nextmastery.learn import learn
    from nextmastery.cli import register_cli
    from nextmastery.codeblock import render_code_block

    app.register_blueprint(main)
    app.register_blueprint(learn)
    app.register_error_handler(404, page_not_found)
    register_cli(app)

    app.jinja_env.globals['code_block'] = render_code_block

    # ── Sidebar context processor ─────────────────────────────────────────────
    # Injects the course navigation tree into every template, with the
    # current page marked active and its chapter expanded.
    @app.context_processor
    def inject_navigation():
        from nextmastery.learn.registry import registry
        from nextmastery.learn.utils import _navigation_tree
        return {
            "site_name": app.config.get("SITE_NAME", "Next.js Mastery"),
            "navigation": _navigation_tree(
                registry, request.path if has_request_context() else "/"
            ),
        }

    return app
