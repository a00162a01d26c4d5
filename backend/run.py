"""
Development server.

    python backend/run.py

WSGI servers can load the factory directly, e.g.
``gunicorn --chdir backend "storefront:create_app()"``.
"""

from storefront import create_app


def main() -> None:
    app = create_app()
    port = app.config['PORT']
    print(f"Server is running on port {port}...")
    # One request at a time: the JSON store has no locking
    app.run(host='0.0.0.0', port=port, threaded=False)


if __name__ == '__main__':
    main()
