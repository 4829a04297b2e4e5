"""
Frontend Routes
"""

from flask import render_template

from classbook.frontend import frontend_bp


@frontend_bp.route('/')
def index():
    """Single-page client; views are switched client-side via the URL hash"""
    return render_template('index.html')
