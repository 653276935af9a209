"""
Default field selectors for issue-tracker entities.

These define which fields are requested for each entity type when a caller
does not configure its own field set.
"""

from enum import Enum

from attrs import frozen


class EntityType(Enum):
    issue = "issue"
    sprint = "sprint"
    agile = "agile"


@frozen
class FieldSetDefinition:
    entity: EntityType
    fields: str
    description: str | None = None


DEFAULT_ISSUE_FIELDS = (
    "id,idReadable,Stage,summary,description,created,updated,resolved,"
    "numberInProject,$type,project($type,id,name),"
    "reporter($type,id,login,ringId,name),updater($type,id,login),"
    "customFields($type,id,name,projectCustomField(id,field(id,name)),"
    "value($type,id,name,isResolved,fullName,login,avatarUrl,color(id))),"
    "links($type,direction,id,linkType($type,id,localizedName)),"
    "visibility($type,id,permittedGroups($type,id,name),permittedUsers($type,id,login)),"
    "comments($type,id,text,author($type,id,login),created)"
)

DEFAULT_SPRINT_FIELDS = (
    "id,name,goal,start,finish,archived,isDefault,unresolvedIssuesCount,"
    "issues(id,idReadable,projectCustomField(id,field(id,name)))"
)

DEFAULT_AGILE_FIELDS = (
    "id,name,owner(id,name,login),projects(id,name),"
    f"sprints({DEFAULT_SPRINT_FIELDS}),"
    "columnSettings(field(id,name),columns(presentation,isResolved,fieldValues(id,name)))"
)

DEFAULT_FIELD_SETS = {
    EntityType.issue.value: FieldSetDefinition(
        entity=EntityType.issue,
        fields=DEFAULT_ISSUE_FIELDS,
        description="Issue with custom fields, links, visibility and comments",
    ),
    EntityType.sprint.value: FieldSetDefinition(
        entity=EntityType.sprint,
        fields=DEFAULT_SPRINT_FIELDS,
        description="Sprint with its issues",
    ),
    EntityType.agile.value: FieldSetDefinition(
        entity=EntityType.agile,
        fields=DEFAULT_AGILE_FIELDS,
        description="Agile board with sprints and column settings",
    ),
}
