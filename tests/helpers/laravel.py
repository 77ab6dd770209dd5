# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Sample Laravel sources used across installer tests."""

from __future__ import annotations

BOOTSTRAP_APP = """<?php

use Illuminate\\Foundation\\Application;
use Illuminate\\Foundation\\Configuration\\Exceptions;
use Illuminate\\Foundation\\Configuration\\Middleware;

return Application::configure(basePath: dirname(__DIR__))
    ->withRouting(
        web: __DIR__.'/../routes/web.php',
        health: '/up',
    )
    ->withMiddleware(function (Middleware $middleware) {
        //
    })
    ->withExceptions(function (Exceptions $exceptions) {
        //
    })->create();
"""


HTTP_KERNEL = """<?php

namespace App\\Http;

use Illuminate\\Foundation\\Http\\Kernel as HttpKernel;

class Kernel extends HttpKernel
{
    protected $middlewareGroups = [
        'web' => [
            \\App\\Http\\Middleware\\EncryptCookies::class,
            \\Illuminate\\Session\\Middleware\\StartSession::class,
            \\Illuminate\\Routing\\Middleware\\SubstituteBindings::class,
        ],

        'api' => [
            \\Illuminate\\Routing\\Middleware\\ThrottleRequests::class.':api',
            \\Illuminate\\Routing\\Middleware\\SubstituteBindings::class,
        ],
    ];
}
"""


APP_LAYOUT = """<!DOCTYPE html>
<html>
    <head>
        <title>{{ config('app.name') }}</title>
    </head>
    <body>
        {{ $slot }}
    </body>
</html>
"""
