from .person_views import (
    person_list,
    person_detail,
    person_by_name
)
