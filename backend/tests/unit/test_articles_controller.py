"""Unit tests for ArticleController with a fake repository and recording renderer."""

import pytest
from sqlalchemy.exc import OperationalError

from article_board.application.schemas import ArticleForm
from article_board.application.services import ArticleService
from article_board.presentation.web.articles_controller import ArticleController

from tests.fakes import make_request


@pytest.fixture
def controller(service, views) -> ArticleController:
    return ArticleController(service=service, views=views)


async def _seed(service: ArticleService, title: str = "A") -> int:
    article = await service.create_article(ArticleForm(title=title, author="B", body="C"))
    return article.id


@pytest.mark.asyncio
async def test_index_renders_articles_newest_first(controller, service, views):
    first = await _seed(service, "First")
    second = await _seed(service, "Second")

    response = await controller.index(make_request())

    assert response.status_code == 200
    template, context, _ = views.last
    assert template == "articles/index"
    assert [a.id for a in context["articles"]] == [second, first]


@pytest.mark.asyncio
async def test_new_form_renders_empty_form(controller, views):
    await controller.new_form(make_request(path="/articles/new"))

    template, context, _ = views.last
    assert template == "articles/new"
    assert context["article"] == ArticleForm()
    assert context["title"] == "New Article"


@pytest.mark.asyncio
async def test_create_redirects_to_new_article(controller, service):
    response = await controller.create(
        make_request("POST"), ArticleForm(title="A", author="B", body="C")
    )

    assert response.status_code == 302
    articles = await service.list_articles()
    assert response.headers["location"] == f"/articles/{articles[0].id}"


@pytest.mark.asyncio
async def test_create_with_empty_title_rerenders_form(controller, service, views):
    submitted = ArticleForm(title="", author="B", body="C")

    response = await controller.create(make_request("POST"), submitted)

    assert response.status_code == 200
    template, context, _ = views.last
    assert template == "articles/new"
    assert context["article"].author == "B"
    assert context["article"].body == "C"
    assert context["errors"] == ['Please provide a value for "Title"']
    assert await service.list_articles() == []


@pytest.mark.asyncio
async def test_edit_form_renders_stored_values(controller, service, views):
    article_id = await _seed(service, "Editable")

    await controller.edit_form(make_request(), article_id)

    template, context, _ = views.last
    assert template == "articles/edit"
    assert context["article"].id == article_id
    assert context["article"].title == "Editable"


@pytest.mark.asyncio
async def test_edit_form_missing_article_is_404(controller, views):
    response = await controller.edit_form(make_request(), 404)
    assert response.status_code == 404
    assert views.calls == []


@pytest.mark.asyncio
async def test_show_uses_article_title(controller, service, views):
    article_id = await _seed(service, "Headline")

    await controller.show(make_request(), article_id)

    template, context, _ = views.last
    assert template == "articles/show"
    assert context["title"] == "Headline"


@pytest.mark.asyncio
async def test_show_missing_article_is_404(controller):
    response = await controller.show(make_request(), 1)
    assert response.status_code == 404
    assert response.body == b""


@pytest.mark.asyncio
async def test_update_redirects_to_article(controller, service):
    article_id = await _seed(service)

    response = await controller.update(
        make_request("POST"), article_id, ArticleForm(title="X", author="Y", body="Z")
    )

    assert response.status_code == 302
    assert response.headers["location"] == f"/articles/{article_id}"
    assert (await service.get_article(article_id)).title == "X"


@pytest.mark.asyncio
async def test_update_invalid_keeps_id_and_submitted_values(controller, service, views):
    article_id = await _seed(service, "Original")

    await controller.update(
        make_request("POST"), article_id, ArticleForm(title="Changed", author="", body="")
    )

    template, context, _ = views.last
    assert template == "articles/edit"
    assert context["article"].id == article_id
    assert context["article"].title == "Changed"
    assert [e.field for e in context["article"].errors] == ["author", "body"]
    assert (await service.get_article(article_id)).title == "Original"


@pytest.mark.asyncio
async def test_update_missing_article_is_404(controller):
    response = await controller.update(
        make_request("POST"), 99, ArticleForm(title="X", author="Y", body="Z")
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_form_renders_even_when_missing(controller, views):
    response = await controller.delete_form(make_request(), 5)

    assert response.status_code == 200
    template, context, _ = views.last
    assert template == "articles/delete"
    assert context["article"] is None


@pytest.mark.asyncio
async def test_delete_then_delete_again(controller, service):
    article_id = await _seed(service)

    first = await controller.delete(make_request("POST"), article_id)
    second = await controller.delete(make_request("POST"), article_id)

    assert first.status_code == 302
    assert first.headers["location"] == "/articles"
    assert second.status_code == 404


@pytest.mark.asyncio
async def test_persistence_errors_propagate(broken_service, views):
    controller = ArticleController(broken_service, views)

    with pytest.raises(OperationalError):
        await controller.index(make_request())
    with pytest.raises(OperationalError):
        await controller.create(make_request("POST"), ArticleForm(title="A", author="B", body="C"))
    with pytest.raises(OperationalError):
        await controller.delete(make_request("POST"), 1)
