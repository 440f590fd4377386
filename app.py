import os

from playground import create_app

app = create_app()

if __name__ == "__main__":
    config = app.config["PLAYGROUND_CONFIG"]
    print("Working dir:", os.getcwd())
    app.run(host=config.host, port=config.port, debug=config.flask_debug)
