import typer


def params_callback(ctx: typer.Context, value: list[str] | None) -> dict[str, str] | None:
    if ctx.resilient_parsing:
        return
    params = {}
    for item in value or []:
        key, sep, param_value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(
                message=f"'{item}' is not a valid parameter, expected key=value",
                param_hint="--param, -p",
            )
        params[key] = param_value
    return params
