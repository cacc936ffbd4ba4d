# gfmeditor/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from gfmeditor.markdown.renderer import render_gfm

register = template.Library()


@register.filter(name="gfm")
def gfm_filter(value):
    """Render GitHub flavoured markdown with the default pipeline"""
    return mark_safe(render_gfm(value))
