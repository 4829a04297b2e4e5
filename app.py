"""
Classbook
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the classbook package.
"""

import os

from classbook import create_app

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    app.run(debug=os.environ.get('FLASK_DEBUG') == '1', host='0.0.0.0',
            port=int(os.environ.get('PORT', 5001)))
