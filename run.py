# Load .env before the config class reads the environment
from dotenv import load_dotenv
load_dotenv()

import os

from nextmastery import create_app

app = create_app()

if __name__ == '__main__':
    app.run(debug=os.environ.get('FLASK_DEBUG') == '1')
