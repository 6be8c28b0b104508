"""Constants for CLI commands."""

DISPLAY_FORMATS = ("text", "json", "yaml")

MESSAGES_TEMPLATE = """{% for line in errors %}
ERROR {{ line }}
{% endfor %}
{% for line in warnings %}
WARNING {{ line }}
{% endfor %}"""

INTEGRITY_SUMMARY_TEMPLATE = """Integrity summary ({{ documents_checked }} documents, {{ references_checked }} references)
  OK: {{ ok_count }}
  BROKEN: {{ broken_count }}
  EXTERNAL: {{ external_count }}
  MALFORMED: {{ malformed_count }}
{% for entry in broken %}
  {{ entry.path }}:{{ entry.line }}:{{ entry.target }}
{% endfor %}"""

PLAN_TEMPLATE = """Moves ({{ move_count }})
{% for move in moves %}
  {{ move['from'] }} -> {{ move['to'] }}
{% endfor %}
Documents
{% for doc in documents %}
  {{ doc.path }}{{ ' -> ' ~ doc.destination if doc.destination != doc.path else '' }}: {{ doc.rewrites }} to rewrite, {{ doc.unresolved }} unresolved
{% endfor %}
Predicted rewrites ({{ patch_count }})
{% for patch in patches %}
  {{ patch.path }}:{{ patch.line }}: {{ patch.old }} -> {{ patch.new }}
{% endfor %}"""

APPLY_TEMPLATE = """Moved {{ move_count }} files
{% for move in moves %}
  {{ move['from'] }} -> {{ move['to'] }}
{% endfor %}
Documents
{% for doc in documents %}
  {{ doc.path }}: {{ doc.rewritten }} rewritten, {{ doc.unresolved }} unresolved{{ ' (' ~ doc.error ~ ')' if doc.error else '' }}
{% endfor %}
Broken before: {{ broken_before }}"""
