from fixit_admin.core.listing import ListView
from fixit_admin.services.collection import CollectionService


class NewsService(CollectionService):
    resource = "news"
    view = ListView(search_fields=("title", "postedBy"))
