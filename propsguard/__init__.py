"""propsguard - moves component props destructuring out of parameter lists."""

__version__ = "0.3.0"
