# cli.py
import click
import logging
from archive_api.config.settings import get_settings

# Configure logging
logger = logging.getLogger(__name__)

@click.group()
def cli():
    """CLI commands for running and inspecting the archive API"""
    pass

@cli.command()
def show_config():
    """Show current configuration"""
    settings = get_settings()

    click.echo("Current Configuration:")
    click.echo(f"  Deployment Mode: {settings.deployment_mode}")
    click.echo(f"  AWS Region: {settings.aws_region}")
    click.echo(f"  AWS Endpoint: {settings.aws_endpoint_url}")
    click.echo(f"  S3 Bucket: {settings.s3_bucket_name}")
    click.echo(f"  Delivery Base: {settings.cloudfront_url}")
    click.echo(f"  Cognito User Pool: {settings.cognito_user_pool_id}")
    click.echo(f"  Record Store: {'MongoDB' if settings.mongodb_uri else f'SQLite ({settings.database_path})'}")
    click.echo(f"  Port: {settings.port}")

@cli.command()
@click.option("--host", default="0.0.0.0", help="Interface to bind")
@click.option("--port", type=int, default=None, help="Port to listen on (defaults to PORT)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host, port, reload):
    """Run the API with uvicorn"""
    import uvicorn

    settings = get_settings()
    port = port or settings.port
    logger.info(f"Starting archive API on {host}:{port}")
    uvicorn.run("archive_api.main:create_app", factory=True, host=host, port=port, reload=reload)

if __name__ == "__main__":
    cli()
