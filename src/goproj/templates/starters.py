"""Go starter files, one per project kind."""

CLI_MAIN = '''package main

import (
	"flag"
	"fmt"
	"os"
)

func main() {
	name := flag.String("name", "world", "who to greet")
	flag.Parse()

	if flag.NArg() > 0 {
		fmt.Fprintf(os.Stderr, "unexpected arguments: %v\\n", flag.Args())
		os.Exit(2)
	}

	fmt.Printf("hello %s\\n", *name)
}
'''

API_MAIN = '''package main

import (
	"log"
	"net/http"
)

func loggingMiddleware(next http.Handler) http.Handler {
	return http.HandlerFunc(func(w http.ResponseWriter, r *http.Request) {
		xw := NewXResponseWriter(w)

		next.ServeHTTP(xw, r)

		log.Println(xw.statusCode, http.StatusText(xw.statusCode), r.URL.String())
	})
}

type XResponseWriter struct {
	http.ResponseWriter
	statusCode int
}

func NewXResponseWriter(w http.ResponseWriter) *XResponseWriter {
	return &XResponseWriter{w, http.StatusOK}
}

func (xw *XResponseWriter) WriteHeader(code int) {
	xw.statusCode = code
	xw.ResponseWriter.WriteHeader(code)
}

func main() {
	mux := http.NewServeMux()
	mux.HandleFunc("/ok", func(w http.ResponseWriter, r *http.Request) {
		w.Header().Add("Content-Type", "application/json")
		w.Write([]byte(`{"message": "hello world"}`))
	})
	mux.HandleFunc("/bad", func(w http.ResponseWriter, r *http.Request) {
		w.Header().Add("Content-Type", "application/json")
		w.WriteHeader(http.StatusBadRequest)
		w.Write([]byte(`{"message": "bad request"}`))
	})
	mux.HandleFunc("/err", func(w http.ResponseWriter, r *http.Request) {
		w.Header().Add("Content-Type", "application/json")
		w.WriteHeader(http.StatusInternalServerError)
		w.Write([]byte(`{"message": "internal error"}`))
	})

	server := http.Server{
		Addr:    ":8080",
		Handler: loggingMiddleware(mux),
	}

	log.Println("starting server on port :8080")
	if err := server.ListenAndServe(); err != nil {
		log.Printf("error: %+v\\n", err)
	}
}
'''

APP_MAIN = '''package main

import (
	"fmt"
	"log"
	"net/http"
)

const page = `<!DOCTYPE html>
<html>
<head>
	<title>app</title>
</head>
<body>
	<p>hello world</p>
</body>
</html>
`

func main() {
	log.Println("starting server on port :8080")

	http.HandleFunc("/", func(w http.ResponseWriter, r *http.Request) {
		w.Header().Set("Content-Type", "text/html")
		fmt.Fprint(w, page)
	})

	log.Fatal(http.ListenAndServe(":8080", nil))
}
'''
