"""Entry point for moodtunes — mood text in, Spotify playlist out."""

import argparse
import logging
import sys


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "configure":
        _configure(args)
        return

    _serve(args)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="moodtunes", description=__doc__)
    parser.add_argument("--log-level", default="info")
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run the HTTP API (default)")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.add_argument("--fallback-only", action="store_true", help="Skip the LLM provider entirely")

    configure = sub.add_parser("configure", help="Store credentials in config.json / OS keychain")
    configure.add_argument("--spotify-client-id", default=None)
    configure.add_argument("--spotify-client-secret", default=None)
    configure.add_argument("--llm-provider", default=None)
    configure.add_argument("--llm-api-key", default=None)
    configure.add_argument("--llm-model", default=None)
    configure.add_argument("--fallback-only", choices=("true", "false"), default=None)

    parser.set_defaults(command="serve", host=None, port=None, fallback_only=False)
    return parser


def _configure(args):
    from moodtunes.adapters.classifier import PROVIDERS
    from moodtunes.adapters.config.json_config_adapter import JsonConfigAdapter
    from moodtunes.domain.errors import ConfigurationError

    if args.llm_provider and args.llm_provider not in PROVIDERS:
        print(f"Unknown provider '{args.llm_provider}'. Choose one of: {', '.join(PROVIDERS)}")
        sys.exit(2)

    adapter = JsonConfigAdapter()
    try:
        cfg = adapter.load()
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)
    updates = {
        "spotify_client_id": args.spotify_client_id,
        "spotify_client_secret": args.spotify_client_secret,
        "llm_provider": args.llm_provider,
        "llm_api_key": args.llm_api_key,
        "llm_model": args.llm_model,
    }
    cfg.update({k: v for k, v in updates.items() if v is not None})
    if args.fallback_only is not None:
        cfg["use_fallback_only"] = args.fallback_only == "true"
    try:
        adapter.save(cfg)
    except ConfigurationError as e:
        print(f"Could not save configuration: {e}")
        sys.exit(1)

    print(f"Configuration saved to {adapter.path}")
    if not adapter.is_configured():
        print("Spotify client ID/secret are still missing; playlist lookups will fail.")


def _serve(args):
    import dataclasses

    import uvicorn

    from moodtunes.adapters.config.json_config_adapter import JsonConfigAdapter
    from moodtunes.bootstrap import build_app
    from moodtunes.config import load_config
    from moodtunes.domain.errors import ConfigurationError

    try:
        config = load_config(config_port=JsonConfigAdapter())
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)

    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port:
        overrides["port"] = args.port
    if args.fallback_only:
        overrides["use_fallback_only"] = True
    if overrides:
        config = dataclasses.replace(config, **overrides)

    app = build_app(config)
    print(f"Server running on port {config.port}")
    uvicorn.run(app, host=config.host, port=config.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
