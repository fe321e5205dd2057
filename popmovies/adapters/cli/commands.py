"""
Commandes CLI pour interroger TMDB (films, critiques, videos, images, configuration).
"""

import asyncio
from typing import Annotated

import typer
from rich.table import Table

from popmovies.adapters.cli.helpers import console, suppress_loguru, with_container
from popmovies.core.value_objects import DataPage, ImageSize, Movie
from popmovies.utils.constants import MAX_PAGE_NUMBER, MIN_PAGE_NUMBER

# Longueur maximale affichee pour le texte d'une critique
REVIEW_PREVIEW_LENGTH = 500

PageOption = Annotated[
    int,
    typer.Option(
        "--page", "-p",
        min=MIN_PAGE_NUMBER,
        max=MAX_PAGE_NUMBER,
        help="Numero de page (1 a 1000)",
    ),
]


def _render_movie_page(title: str, movie_page: DataPage[Movie]) -> None:
    """Affiche une page de films sous forme de tableau."""
    table = Table(title=title)
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Titre", style="bold")
    table.add_column("Annee", justify="center")
    table.add_column("Note", justify="right", style="green")
    table.add_column("Votes", justify="right")

    for movie in movie_page.results:
        table.add_row(
            str(movie.id),
            movie.title,
            str(movie.year),
            f"{movie.vote_average:.1f}",
            f"{movie.vote_count:,}",
        )

    console.print(table)
    console.print(
        f"[dim]Page {movie_page.page_number}/{movie_page.total_page_count}"
        f" ({movie_page.total_result_count:,} resultats)[/dim]"
    )


def top_rated(page: PageOption = 1) -> None:
    """Affiche les films les mieux notes."""
    asyncio.run(_top_rated_async(page))


@with_container()
async def _top_rated_async(container, page: int) -> None:
    """Implementation async de la commande top-rated."""
    movie_page = await container.movie_client().get_top_rated_movies(page)
    with suppress_loguru():
        _render_movie_page("Films les mieux notes", movie_page)


def popular(page: PageOption = 1) -> None:
    """Affiche les films populaires."""
    asyncio.run(_popular_async(page))


@with_container()
async def _popular_async(container, page: int) -> None:
    """Implementation async de la commande popular."""
    movie_page = await container.movie_client().get_popular_movies(page)
    with suppress_loguru():
        _render_movie_page("Films populaires", movie_page)


def reviews(
    movie_id: Annotated[int, typer.Argument(help="ID TMDB du film")],
    page: PageOption = 1,
) -> None:
    """Affiche les critiques d'un film."""
    asyncio.run(_reviews_async(movie_id, page))


@with_container()
async def _reviews_async(container, movie_id: int, page: int) -> None:
    """Implementation async de la commande reviews."""
    review_page = await container.movie_client().get_movie_reviews(movie_id, page)

    with suppress_loguru():
        if review_page.is_empty:
            console.print("[yellow]Aucune critique pour ce film.[/yellow]")
            return

        for review in review_page.results:
            content = review.content
            if len(content) > REVIEW_PREVIEW_LENGTH:
                content = content[:REVIEW_PREVIEW_LENGTH] + "..."
            console.print(f"\n[bold cyan]{review.author}[/bold cyan]")
            console.print(content)

        console.print(
            f"\n[dim]Page {review_page.page_number}/{review_page.total_page_count}"
            f" ({review_page.total_result_count} critiques)[/dim]"
        )


def videos(
    movie_id: Annotated[int, typer.Argument(help="ID TMDB du film")],
) -> None:
    """Affiche les videos (bandes-annonces, extraits...) d'un film."""
    asyncio.run(_videos_async(movie_id))


@with_container()
async def _videos_async(container, movie_id: int) -> None:
    """Implementation async de la commande videos."""
    video_links = await container.movie_client().get_movie_video_links(movie_id)

    with suppress_loguru():
        if not video_links:
            console.print("[yellow]Aucune video pour ce film.[/yellow]")
            return

        table = Table(title=f"Videos du film {movie_id}")
        table.add_column("Type", style="magenta")
        table.add_column("Nom", style="bold")
        table.add_column("Site")
        table.add_column("Cle", style="dim")
        table.add_column("Taille", justify="right")
        for video_link in video_links:
            table.add_row(
                video_link.type.value,
                video_link.name,
                video_link.site,
                video_link.key,
                f"{video_link.size}p",
            )
        console.print(table)


def poster(
    relative_path: Annotated[str, typer.Argument(help="Chemin relatif (ex: /abc.jpg)")],
    size: Annotated[
        str, typer.Option("--size", "-s", help="Taille TMDB (w92, w185, original...)")
    ] = ImageSize.W_185.tmdb_key,
    backdrop: Annotated[
        bool, typer.Option("--backdrop", help="Image de fond au lieu d'une affiche")
    ] = False,
    secure: Annotated[bool, typer.Option("--secure", help="URL HTTPS")] = False,
) -> None:
    """Affiche l'URL d'une affiche (ou d'une image de fond) TMDB."""
    image_size = ImageSize.from_tmdb_key(size)
    if image_size is None:
        console.print(f"[red]Taille d'image inconnue :[/red] {size}")
        raise typer.Exit(code=1)
    asyncio.run(_poster_async(relative_path, image_size, backdrop, secure))


@with_container(requires_configuration=True)
async def _poster_async(
    container, relative_path: str, image_size: ImageSize, backdrop: bool, secure: bool
) -> None:
    """Implementation async de la commande poster."""
    factory = container.asset_url_factory()
    if backdrop:
        url = factory.get_backdrop_image_url(relative_path, image_size, secure=secure)
    else:
        url = factory.get_poster_image_url(relative_path, image_size, secure=secure)
    typer.echo(url)


def configuration(
    wait: Annotated[
        bool,
        typer.Option("--wait", "-w", help="Attendre le rafraichissement avant l'affichage"),
    ] = False,
) -> None:
    """Affiche la configuration TMDB adoptee et son origine."""
    asyncio.run(_configuration_async(wait))


@with_container(requires_configuration=True)
async def _configuration_async(container, wait: bool) -> None:
    """Implementation async de la commande configuration."""
    cache = container.configuration_cache()
    if wait:
        await cache.wait_for_refresh()

    tmdb_configuration = cache.get_tmdb_configuration()
    with suppress_loguru():
        console.print(f"[bold]Origine :[/bold] {cache.source.value}")
        console.print(f"[bold]Fichier de cache :[/bold] {cache.cache_file}")
        console.print(f"[bold]URL de base :[/bold] {tmdb_configuration.asset_base_url}")
        console.print(f"[bold]URL securisee :[/bold] {tmdb_configuration.asset_secure_base_url}")

        table = Table(title="Tailles d'images")
        table.add_column("Type", style="cyan")
        table.add_column("Tailles")
        for label, sizes in (
            ("Fond", tmdb_configuration.backdrop_sizes),
            ("Logo", tmdb_configuration.logo_sizes),
            ("Affiche", tmdb_configuration.poster_sizes),
            ("Profil", tmdb_configuration.profile_sizes),
            ("Still", tmdb_configuration.still_sizes),
        ):
            table.add_row(label, ", ".join(size.tmdb_key for size in sizes))
        console.print(table)
