#!/usr/bin/env python3
"""
BotCafe - development server entry point.
Run with: python run.py
"""

import os

from dotenv import load_dotenv
load_dotenv()

from botcafe import create_app
from config import config

app = create_app()

if __name__ == '__main__':
    host = os.getenv('BOTCAFE_HOST', '127.0.0.1')
    port = int(os.getenv('BOTCAFE_PORT', '5001'))

    app.logger.info('BotCafe API listening on http://%s:%d', host, port)
    app.run(debug=config.DEBUG, host=host, port=port, threaded=True)
