"""Base layer: errors, models, HTTP, resilience, logging and reporting.

Submodules are imported directly (``currents_cancel.base.errors``) so this
package stays free of import-time side effects.
"""
