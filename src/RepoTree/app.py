"""Streamlit UI for RepoTree."""

from __future__ import annotations

import logging

import streamlit as st
from streamlit.components.v1 import html as st_html

from RepoTree import token_store
from RepoTree.analyzer import analyze_repository
from RepoTree.config_store import (
    JsonFileStore,
    load_config,
    load_last_repo_url,
    save_config,
    save_last_repo_url,
)
from RepoTree.exporter import serialize
from RepoTree.interactive_view import count_rows, render_interactive_html
from RepoTree.models import AsciiStyle, ExportFormat, FormattingOptions, ProviderType
from RepoTree.providers.base import RepoProvider
from RepoTree.providers.github import GitHubError, GitHubProvider
from RepoTree.providers.gitlab import GitLabError, GitLabProvider
from RepoTree.search_filter import filter_tree
from RepoTree.tree_builder import build_hierarchy
from RepoTree.tree_renderer import render_tree
from RepoTree.url_parser import (
    URLParseError,
    parse_repo_url,
    validate_github_url,
    validate_gitlab_url,
)

logger = logging.getLogger(__name__)

_PROVIDER_LABELS = {ProviderType.GITHUB: "GitHub", ProviderType.GITLAB: "GitLab"}
_STYLE_LABELS = {
    AsciiStyle.BASIC: "Basic",
    AsciiStyle.DETAILED: "Detailed",
    AsciiStyle.MINIMAL: "Minimal",
}


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def _settings_store() -> JsonFileStore:
    if "settings_store" not in st.session_state:
        st.session_state["settings_store"] = JsonFileStore()
    return st.session_state["settings_store"]


def main() -> None:
    st.set_page_config(
        page_title="RepoTree",
        page_icon="🌳",
        layout="wide",
    )
    store = _settings_store()

    # --- Header with settings popover ---
    header_left, header_right = st.columns([8, 1])
    with header_left:
        st.title("RepoTree")
    with header_right:
        st.markdown("<div style='height: 1.5rem'></div>", unsafe_allow_html=True)
        with st.popover("⚙", use_container_width=True):
            tokens = _token_settings()
            options = _formatting_settings(store)

    st.caption(
        "Generate and share clean ASCII trees of your GitHub & GitLab repositories."
    )

    # --- Repository input ---
    type_col, url_col = st.columns([1, 4])
    with type_col:
        default_provider = (
            ProviderType.GITLAB if _qp("provider") == "gitlab" else ProviderType.GITHUB
        )
        provider_type = st.selectbox(
            "Repository Type",
            options=list(ProviderType),
            index=list(ProviderType).index(default_provider),
            format_func=lambda p: _PROVIDER_LABELS[p]
            + (" (Private)" if tokens[p] else ""),
        )
    with url_col:
        url = st.text_input(
            "Repository URL",
            value=_qp("url") or load_last_repo_url(store),
            placeholder=(
                "https://github.com/username/repo"
                if provider_type == ProviderType.GITHUB
                else "https://gitlab.com/username/repo"
            ),
        )

    url_error = _validate_url(url, provider_type)
    if url and url_error:
        st.error(url_error)

    generate_clicked = st.button(
        "Generate",
        type="primary",
        use_container_width=True,
        disabled=bool(url and url_error),
    )

    if generate_clicked and url:
        _run_fetch(url, provider_type, tokens[provider_type])
        save_last_repo_url(store, url.strip())
    elif generate_clicked:
        st.error("Repository URL is required.")

    if "result" in st.session_state:
        _show_result(st.session_state["result"], options)


def _validate_url(url: str, provider_type: ProviderType) -> str:
    if not url:
        return ""
    if provider_type == ProviderType.GITHUB and not validate_github_url(url):
        return "Enter a valid GitHub URL"
    if provider_type == ProviderType.GITLAB and not validate_gitlab_url(url):
        return "Enter a valid GitLab URL"
    return ""


def _token_settings() -> dict[ProviderType, str]:
    """Token inputs; returns the stripped token per provider ("" if unset)."""
    st.subheader("Access tokens")
    tokens: dict[ProviderType, str] = {}
    saved: dict[ProviderType, str] = {}
    for provider in ProviderType:
        saved[provider] = token_store.load_token(provider) or ""
        tokens[provider] = st.text_input(
            f"{_PROVIDER_LABELS[provider]} Token (optional)",
            value=saved[provider],
            type="password",
            help="Required for private repositories. Also raises the API rate limit.",
        ).strip()

    if token_store.is_available():
        remember = st.checkbox(
            "Save tokens to OS keychain",
            value=any(saved.values()),
        )
        for provider in ProviderType:
            if remember and tokens[provider]:
                if tokens[provider] != saved[provider]:
                    token_store.save_token(provider, tokens[provider])
            elif saved[provider]:
                token_store.delete_token(provider)

    return tokens


def _formatting_settings(store: JsonFileStore) -> FormattingOptions:
    """Formatting inputs, persisted whenever they change."""
    st.subheader("Customize")
    current = load_config(store)

    style = st.selectbox(
        "ASCII style",
        options=list(AsciiStyle),
        index=list(AsciiStyle).index(current.ascii_style),
        format_func=lambda s: _STYLE_LABELS[s],
    )
    options = FormattingOptions(
        ascii_style=style,
        use_icons=st.checkbox("Use icons", value=current.use_icons),
        show_line_numbers=st.checkbox(
            "Show line numbers", value=current.show_line_numbers
        ),
        show_root_directory=st.checkbox(
            "Show root directory", value=current.show_root_directory
        ),
        show_trailing_slash=st.checkbox(
            "Show trailing slash", value=current.show_trailing_slash
        ),
        show_descriptions=st.checkbox(
            "Show descriptions", value=current.show_descriptions
        ),
    )
    if options != current:
        save_config(store, options)
    return options


def _make_provider(provider_type: ProviderType, token: str) -> RepoProvider:
    if provider_type == ProviderType.GITLAB:
        return GitLabProvider(token=token or None)
    return GitHubProvider(token=token or None)


def _run_fetch(url: str, provider_type: ProviderType, token: str) -> None:
    try:
        repo_info = parse_repo_url(url)
    except URLParseError as exc:
        st.error(f"Invalid URL: {exc}")
        return

    if repo_info.provider != provider_type:
        st.error(
            f"This is a {_PROVIDER_LABELS[repo_info.provider]} URL. "
            "Switch the repository type and try again."
        )
        return

    provider = _make_provider(provider_type, token)

    try:
        with st.spinner("Fetching repository structure..."):
            entries, validation = provider.fetch_structure(repo_info)
    except (GitHubError, GitLabError) as exc:
        st.error(str(exc))
        return

    if not validation.is_valid:
        for err in validation.errors:
            st.error(err)
        return

    tree = build_hierarchy(entries)
    st.session_state["result"] = {
        "repo_url": repo_info.raw_url,
        "tree": tree,
        "analysis": analyze_repository(tree),
        "warnings": validation.warnings,
    }
    logger.info("Fetched %d entries from %s", len(entries), repo_info.full_name)


def _no_results_message(term: str) -> str:
    return (
        f'No files or folders found matching "{term}".\n\n'
        "Tips:\n"
        "- Check the spelling\n"
        "- Try searching for partial names\n"
        "- Include file extensions (.js, .ts, .json)"
    )


def _show_result(result: dict, options: FormattingOptions) -> None:
    """Display the tree views, downloads and charts of a stored result."""
    for warning in result["warnings"]:
        st.warning(warning)

    repo_url = result["repo_url"]
    search_term = st.text_input(
        "Search files/folders", value=_qp("q"), placeholder="Search files/folders"
    )
    tree = filter_tree(result["tree"], search_term)
    structure = render_tree(tree, options, repo_url=repo_url)

    ascii_tab, interactive_tab = st.tabs(["ASCII", "Interactive"])
    with ascii_tab:
        if structure:
            st.code(
                structure,
                language="text",
                line_numbers=options.show_line_numbers,
            )
        else:
            st.text(_no_results_message(search_term))
    with interactive_tab:
        if tree.is_empty():
            st.text(_no_results_message(search_term))
        else:
            height = min(600, 40 + 26 * count_rows(tree))
            st_html(render_interactive_html(tree, options), height=height, scrolling=True)

    download_cols = st.columns(len(ExportFormat))
    for col, fmt in zip(download_cols, ExportFormat):
        payload = serialize(tree, fmt, options, repo_url=repo_url)
        with col:
            st.download_button(
                label=f".{fmt.value}",
                data=payload.content,
                file_name=payload.file_name,
                mime=payload.mime_type,
                disabled=tree.is_empty(),
                use_container_width=True,
            )

    analysis = result["analysis"]
    if analysis.total_files:
        types_col, languages_col = st.columns(2)
        with types_col:
            st.subheader("File types")
            st.bar_chart(analysis.file_type_rows(), x="name", y="value")
        with languages_col:
            st.subheader("Languages (%)")
            st.bar_chart(analysis.language_rows(), x="name", y="percentage")


if __name__ == "__main__":
    main()
