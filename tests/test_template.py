from vhconfig import config, template


EXPECTED = """<VirtualHost *:8080>
    DocumentRoot /Users/x/projects/acme/web
    ServerName acme.local.blee.ch
    RewriteCond /Users/x/projects/acme/web/%{REQUEST_FILENAME} -f
    RewriteRule ^/(.*\\.php(/.*)?)$ fcgi://127.0.0.1:9072/Users/x/projects/acme/web/$1 [P,QSA,L]
    <Directory /Users/x/projects/acme/web>
        Options -Indexes +FollowSymLinks -MultiViews
        AllowOverride All
        Require all granted
    </Directory>
</VirtualHost>
<VirtualHost *:8443>
    DocumentRoot /Users/x/projects/acme/web
    ServerName acme.local.blee.ch
    RewriteCond /Users/x/projects/acme/web/%{REQUEST_FILENAME} -f
    RewriteRule ^/(.*\\.php(/.*)?)$ fcgi://127.0.0.1:9072/Users/x/projects/acme/web/$1 [P,QSA,L]
    Include "/usr/local/etc/httpd/ssl/ssl-shared-cert.inc"
    <Directory /Users/x/projects/acme/web>
        Options -Indexes +FollowSymLinks -MultiViews
        AllowOverride All
        Require all granted
    </Directory>
</VirtualHost>
"""


def test_project_name_is_last_segment():
    assert template.project_name("/Users/x/projects/acme") == "acme"
    assert template.project_name("/Users/x/projects/acme/") == "acme"
    assert template.config_file_name("acme") == "acme.conf"


def test_render_matches_template():
    assert template.render("/Users/x/projects/acme", "acme", "72") == EXPECTED


def test_render_php_port_suffix():
    rendered = template.render("/srv/shop", "shop", "81")
    assert rendered.count("fcgi://127.0.0.1:9081/srv/shop/web/$1") == 2
    assert "9072" not in rendered


def test_render_tls_block_only_has_include():
    rendered = template.render("/srv/shop", "shop", "72")
    plain, tls = rendered.split("</VirtualHost>\n", 1)
    assert "Include" not in plain
    assert "<VirtualHost *:8443>" in tls
    assert 'Include "/usr/local/etc/httpd/ssl/ssl-shared-cert.inc"' in tls


def test_render_uses_settings():
    settings = config.Settings(
        httpd_root="/opt/httpd",
        http_port=80,
        https_port=443,
        domain_suffix="dev.test",
    )
    rendered = template.render("/srv/shop", "shop", "74", settings)
    assert "<VirtualHost *:80>" in rendered
    assert "<VirtualHost *:443>" in rendered
    assert "ServerName shop.local.dev.test" in rendered
    assert 'Include "/opt/httpd/ssl/ssl-shared-cert.inc"' in rendered


def test_render_is_deterministic():
    first = template.render("/srv/shop", "shop", "72")
    assert template.render("/srv/shop", "shop", "72") == first
