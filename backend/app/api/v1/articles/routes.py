"""Article CRUD API endpoints."""

from fastapi import APIRouter, HTTPException, status

from app.api.v1.articles.dependencies import ArticleServiceDep
from app.api.v1.articles.schemas import ArticleCreate, ArticleListResponse, ArticleResponse, ArticleUpdate
from app.api.v1.schemas import StatusResponse
from app.services.articles.exceptions import ArticleNotFound, InvalidArticleCategory

router = APIRouter(tags=["articles"])

NOT_FOUND_MESSAGE = "Article not found."


@router.get("/articles", response_model=ArticleListResponse, operation_id="listArticles")
async def list_articles(
    service: ArticleServiceDep,
    category_id: int | None = None,
    subcategory_id: int | None = None,
    skip: int = 0,
    limit: int = 50,
) -> ArticleListResponse:
    """List articles, newest first, optionally filtered by category or subcategory."""
    items, total = await service.list_articles(
        category_id=category_id,
        subcategory_id=subcategory_id,
        skip=skip,
        limit=limit,
    )
    return ArticleListResponse(articles=[ArticleResponse.from_model(a) for a in items], total=total)


@router.post(
    "/articles",
    response_model=ArticleResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="createArticle",
)
async def create_article(payload: ArticleCreate, service: ArticleServiceDep) -> ArticleResponse:
    try:
        article = await service.create_article(**payload.model_dump())
    except InvalidArticleCategory as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ArticleResponse.from_model(article)


@router.get("/articles/{article_id}", response_model=ArticleResponse, operation_id="getArticle")
async def get_article(article_id: int, service: ArticleServiceDep) -> ArticleResponse:
    try:
        return ArticleResponse.from_model(await service.get_article(article_id))
    except ArticleNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)


@router.put("/articles/{article_id}", response_model=ArticleResponse, operation_id="updateArticle")
async def update_article(article_id: int, payload: ArticleUpdate, service: ArticleServiceDep) -> ArticleResponse:
    try:
        article = await service.update_article(article_id, **payload.model_dump())
    except ArticleNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    except InvalidArticleCategory as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ArticleResponse.from_model(article)


@router.delete("/articles/{article_id}", response_model=StatusResponse, operation_id="deleteArticle")
async def delete_article(article_id: int, service: ArticleServiceDep) -> StatusResponse:
    try:
        await service.delete_article(article_id)
    except ArticleNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)

    return StatusResponse(status="deleted", message=f"Article {article_id} deleted")
