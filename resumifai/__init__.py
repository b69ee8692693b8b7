"""
resumifai – turns a short video into a summary, a step-by-step guide or a
social media script.

  from resumifai.main import create_app
  app = create_app()   # settings read from the environment
"""

__version__ = "0.3.0"
