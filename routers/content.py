# routers/content.py
from models.content import Award, AwardCreate, Blog, MediaItem, MediaItemCreate, Qna, QnaCreate
from routers.crud import crud_router

qna_router = crud_router("qna", "qna", QnaCreate, Qna, "Q&A")
awards_router = crud_router("awards", "awards", AwardCreate, Award, "Award")
media_router = crud_router("media", "media", MediaItemCreate, MediaItem, "Media item")

# blog posts are authored outside this API
blogs_router = crud_router("blogs", "blogs", Blog, Blog, "Blog", operations=("list", "get"))
