import click
from ja3kit import Ja3, Ja3S, MalformedFingerprintError, UnknownProfileError
from ja3kit.impersonation import describe, get_fingerprint


@click.command()
@click.argument("fingerprint", required=False)
@click.option("--server", is_flag=True, help="Treat the text as a JA3S string.")
@click.option("--profile", help="Inspect a bundled browser profile instead.")
def main(fingerprint: str | None, server: bool, profile: str | None) -> None:
    if profile:
        try:
            record = get_fingerprint(profile)
        except UnknownProfileError as exc:
            click.secho(str(exc), fg="red")
            raise SystemExit(1)
    elif fingerprint is None:
        raise click.UsageError("Pass a fingerprint string or --profile")
    else:
        try:
            record = (Ja3S if server else Ja3).parse(fingerprint)
        except MalformedFingerprintError as exc:
            click.secho(f"Invalid fingerprint: {exc} (field={exc.field})", fg="red")
            raise SystemExit(1)

    click.secho(record.render(), fg="green")
    for name, labels in describe(record).items():
        click.secho(f"{name}: {', '.join(labels) or '-'}", fg="yellow")


if __name__ == "__main__":
    main()
