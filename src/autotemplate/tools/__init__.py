"""Release and authoring tools shipped as console scripts.

Modules:
    concat_rules - Concatenate prompt rule files (autotemplate-concat-rules)
    version_bump - Bump manifest versions (autotemplate-version-bump)
"""
