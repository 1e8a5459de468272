"""
VITAE - Visual Interchangeable Templates for Applicant Experience

A résumé builder core that keeps an immutable résumé document, renders it
through interchangeable visual templates, and exports the result as a PDF.

Architecture:
- Editing Context: Résumé document model and snapshot mutations
- Templating Context: Visual tree rendering for the Modern, Classic and Minimal variants
- Suggestions Context: Async boundary to bullet-point and skill suggestion providers
- Rendering Context: Preview/print tree selection and PDF export
"""

__version__ = "0.1.0"
